"""Shared fixtures for the Open Graph extractor tests."""

from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest


def meta(prop: str, content: str | None = None) -> str:
    """Render one <meta property=...> tag."""
    if content is None:
        return f'<meta property="{prop}">'
    return f'<meta property="{prop}" content="{content}">'


def page(*tags: str) -> str:
    """Wrap meta tags in a minimal HTML document."""
    head = "\n".join(tags)
    return f"<html><head>{head}</head><body><p>body</p></body></html>"


MOVIE_HTML = page(
    meta("og:title", "The Rock"),
    meta("og:type", "movie"),
    meta("og:url", "http://www.imdb.com/title/tt0117500/"),
    meta("og:image", "http://ia.media-imdb.com/rock.jpg"),
    meta("og:site_name", "IMDb"),
    meta("og:description", "A group of U.S. Marines, under command of a renegade general."),
)


@pytest.fixture
def movie_html() -> str:
    return MOVIE_HTML


@pytest.fixture
def mock_client() -> Iterator[Callable[..., httpx.Client]]:
    """Build an httpx.Client whose requests are answered by ``handler``."""
    clients: list[httpx.Client] = []

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield build
    for client in clients:
        client.close()
