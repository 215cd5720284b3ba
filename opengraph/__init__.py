"""
Open Graph metadata extraction.

Usage:
    import opengraph

    page = opengraph.fetch("https://example.com/movie")
    if page is not None:
        print(page.title, page.schema)
"""
from opengraph.layers import MetaTagParser, parse, fetch, fetch_async
from opengraph.models import GraphObject, TYPES, MANDATORY_ATTRIBUTES

__all__ = [
    "parse",
    "fetch",
    "fetch_async",
    "GraphObject",
    "MetaTagParser",
    "TYPES",
    "MANDATORY_ATTRIBUTES",
]
