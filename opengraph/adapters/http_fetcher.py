"""
HTTP fetch adapter for the Open Graph extractor.
Retrieves page HTML; callers decide what to do with transport failures.
"""
from typing import Optional

import httpx

from opengraph.config import config
from opengraph.utils.logger import ComponentLogger

# Failures that mean "this page could not be retrieved"
FETCH_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


class HTTPFetcher:
    """
    Fetches page HTML over HTTP(S) with httpx.

    Raises any of ``FETCH_ERRORS`` on connection, DNS, timeout or
    non-2xx responses. A client passed in is used as-is and left open;
    otherwise a client is created for the request and closed afterwards.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.logger = ComponentLogger("http_fetcher")

    def fetch(self, url: str, client: Optional[httpx.Client] = None) -> str:
        """GET ``url`` and return the response body as text."""
        self.logger.log_action("fetch_html", "started", url=url)

        if client is not None:
            response = client.get(url, headers=config.request_headers())
        else:
            with httpx.Client(timeout=self.timeout, follow_redirects=config.FOLLOW_REDIRECTS) as owned:
                response = owned.get(url, headers=config.request_headers())
        response.raise_for_status()

        self.logger.log_action(
            "fetch_html",
            "completed",
            url=url,
            status_code=response.status_code,
            content_length=len(response.text),
        )
        return response.text

    async def fetch_async(self, url: str, client: Optional[httpx.AsyncClient] = None) -> str:
        """Async variant of :meth:`fetch`."""
        self.logger.log_action("fetch_html", "started", url=url)

        if client is not None:
            response = await client.get(url, headers=config.request_headers())
        else:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=config.FOLLOW_REDIRECTS) as owned:
                response = await owned.get(url, headers=config.request_headers())
        response.raise_for_status()

        self.logger.log_action(
            "fetch_html",
            "completed",
            url=url,
            status_code=response.status_code,
            content_length=len(response.text),
        )
        return response.text
