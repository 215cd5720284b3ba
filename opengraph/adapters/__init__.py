"""Adapters package initialization."""
from opengraph.adapters.html_document import load_document
from opengraph.adapters.http_fetcher import HTTPFetcher

__all__ = ["load_document", "HTTPFetcher"]
