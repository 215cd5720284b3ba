"""Tests for the parse and fetch entry points."""

from __future__ import annotations

import httpx
import pytest

import opengraph
from opengraph import GraphObject
from tests.conftest import MOVIE_HTML, meta, page

URL = "http://www.imdb.com/title/tt0117500/"


class TestParse:
    """opengraph.parse"""

    @pytest.mark.parametrize("strict", [True, False])
    def test_no_meta_tags(self, strict: bool) -> None:
        html = page('<meta name="description" content="plain page">')
        assert opengraph.parse(html, strict=strict) is None

    @pytest.mark.parametrize("strict", [True, False])
    def test_empty_html(self, strict: bool) -> None:
        assert opengraph.parse("", strict=strict) is None

    def test_title_only_strict(self) -> None:
        assert opengraph.parse(page(meta("og:title", "A"))) is None

    def test_title_only_non_strict(self) -> None:
        obj = opengraph.parse(page(meta("og:title", "A")), strict=False)
        assert isinstance(obj, GraphObject)
        assert obj.title == "A"
        assert not obj.valid()

    def test_complete_movie(self, movie_html: str) -> None:
        obj = opengraph.parse(movie_html)
        assert obj is not None
        assert obj.valid()
        assert obj.title == "The Rock"
        assert obj.type == "movie"
        assert obj.schema == "product"
        assert obj.is_movie()
        assert obj.site_name == "IMDb"

    def test_empty_mandatory_value_strict(self) -> None:
        html = page(
            meta("og:title", "A"),
            meta("og:type", "website"),
            meta("og:image", ""),
            meta("og:url", "http://example.com/"),
        )
        assert opengraph.parse(html) is None
        assert opengraph.parse(html, strict=False).image == ""

    def test_article_groups(self) -> None:
        html = page(
            meta("og:title", "Post"),
            meta("og:type", "blog"),
            meta("og:image", "http://example.com/i.png"),
            meta("og:url", "http://example.com/post"),
            meta("article:tag", "a"),
            meta("article:tag", "b"),
            meta("article:published-time", "2024-01-01"),
        )
        obj = opengraph.parse(html)
        assert obj.article == {"tag": ["a", "b"], "published_time": "2024-01-01"}
        assert obj.schema == "website"

    def test_groups_are_read_only(self) -> None:
        html = page(meta("article:tag", "a"), meta("article:tag", "b"))
        obj = opengraph.parse(html, strict=False)
        obj.article["tag"].append("c")
        assert obj.article.tag == ["a", "b"]

    def test_only_grouped_tags_non_strict(self) -> None:
        obj = opengraph.parse(page(meta("book:isbn", "123")), strict=False)
        assert obj.book == {"isbn": "123"}
        assert obj.type is None

    def test_accepts_bytes(self) -> None:
        obj = opengraph.parse(MOVIE_HTML.encode("utf-8"))
        assert obj is not None
        assert obj.url == URL

    def test_independent_results(self, movie_html: str) -> None:
        first = opengraph.parse(movie_html)
        second = opengraph.parse(movie_html)
        assert first == second
        assert first is not second


class TestFetch:
    """opengraph.fetch"""

    def test_success_matches_parse(self, mock_client, movie_html: str) -> None:
        client = mock_client(lambda request: httpx.Response(200, text=movie_html))
        assert opengraph.fetch(URL, client=client) == opengraph.parse(movie_html)

    def test_non_strict_passed_through(self, mock_client) -> None:
        html = page(meta("og:title", "A"))
        client = mock_client(lambda request: httpx.Response(200, text=html))
        assert opengraph.fetch(URL, client=client) is None
        assert opengraph.fetch(URL, strict=False, client=client).title == "A"

    def test_connection_error(self, mock_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        assert opengraph.fetch(URL, client=mock_client(handler)) is None

    def test_timeout(self, mock_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        assert opengraph.fetch(URL, client=mock_client(handler)) is None

    @pytest.mark.parametrize("status", [404, 500, 503])
    def test_error_status(self, mock_client, movie_html: str, status: int) -> None:
        client = mock_client(lambda request: httpx.Response(status, text=movie_html))
        assert opengraph.fetch(URL, client=client) is None

    def test_unsupported_scheme(self) -> None:
        assert opengraph.fetch("ftp://example.com/page") is None

    def test_not_a_url(self) -> None:
        assert opengraph.fetch("not a url") is None

    def test_page_without_data(self, mock_client) -> None:
        client = mock_client(lambda request: httpx.Response(200, text="<html></html>"))
        assert opengraph.fetch(URL, client=client) is None


class TestFetchAsync:
    """opengraph.fetch_async"""

    @pytest.mark.asyncio
    async def test_success_matches_parse(self, movie_html: str) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text=movie_html))
        async with httpx.AsyncClient(transport=transport) as client:
            obj = await opengraph.fetch_async(URL, client=client)
        assert obj == opengraph.parse(movie_html)

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("name resolution failed", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            assert await opengraph.fetch_async(URL, client=client) is None

    @pytest.mark.asyncio
    async def test_unsupported_scheme(self) -> None:
        assert await opengraph.fetch_async("ftp://example.com/page") is None
