"""Layers package initialization."""
from opengraph.layers.meta_tag_parser import MetaTagParser, categorize
from opengraph.layers.extraction import parse, fetch, fetch_async

__all__ = ["MetaTagParser", "categorize", "parse", "fetch", "fetch_async"]
