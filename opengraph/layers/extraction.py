"""
Extraction layer for the Open Graph extractor.
Entry points that turn HTML, or a URL, into a GraphObject.

Both entry points return None when there is no usable data: no
recognized meta tags, mandatory attributes missing in strict mode, or
(for fetch) the page could not be retrieved.
"""
from typing import Optional, Union

import httpx

from opengraph.adapters.http_fetcher import FETCH_ERRORS, HTTPFetcher
from opengraph.layers.meta_tag_parser import MetaTagParser
from opengraph.models.graph_object import GraphObject
from opengraph.utils.logger import ComponentLogger, set_trace_id

logger = ComponentLogger("extraction")


def parse(html: Union[str, bytes], strict: bool = True) -> Optional[GraphObject]:
    """
    Build a GraphObject from raw HTML.

    Args:
        html: The page markup
        strict: Return None unless title, type, image and url are all set.
            Pass False to inspect incomplete data.

    Returns:
        GraphObject, or None if there is no usable data
    """
    set_trace_id()
    return _build(html, strict)


def _build(html: Union[str, bytes], strict: bool, url: Optional[str] = None) -> Optional[GraphObject]:
    """parse() without starting a new trace, so fetches keep theirs."""
    page = GraphObject(MetaTagParser().parse_html(html))

    if not page:
        logger.log_decision(decision="no_data", reason="no_meta_tags", url=url)
        return None

    if strict and not page.valid():
        logger.log_decision(
            decision="no_data",
            reason="missing_mandatory_attributes",
            url=url,
            missing=page.missing_attributes(),
        )
        return None

    return page


def fetch(
    uri: str,
    strict: bool = True,
    client: Optional[httpx.Client] = None,
) -> Optional[GraphObject]:
    """
    Fetch ``uri`` and build a GraphObject from the response body.

    Network failures and non-2xx responses give None instead of raising.
    """
    set_trace_id()
    try:
        html = HTTPFetcher().fetch(uri, client=client)
    except FETCH_ERRORS as e:
        logger.log_error(f"Failed to fetch URL: {str(e)}", error_type="http_error", url=uri)
        return None

    return _build(html, strict, url=uri)


async def fetch_async(
    uri: str,
    strict: bool = True,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[GraphObject]:
    """Async variant of :func:`fetch`."""
    set_trace_id()
    try:
        html = await HTTPFetcher().fetch_async(uri, client=client)
    except FETCH_ERRORS as e:
        logger.log_error(f"Failed to fetch URL: {str(e)}", error_type="http_error", url=uri)
        return None

    return _build(html, strict, url=uri)
