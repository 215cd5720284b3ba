"""
Meta tag parser for the Open Graph extractor.
Turns the <meta> elements of a document into the raw attribute map.
"""
import re
from typing import Dict, Iterator, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from opengraph.adapters.html_document import load_document
from opengraph.models.meta_tag import MetaProperty, Namespace
from opengraph.utils.logger import ComponentLogger

_PROPERTY_RE = re.compile(r"^(og|article|book|video):(.+)$", re.IGNORECASE)


def normalize_key(suffix: str) -> str:
    """Property suffixes use underscores: ``custom-field`` -> ``custom_field``."""
    return suffix.replace("-", "_")


def categorize(attributes: Dict, namespace: str, key: str, content: str) -> None:
    """
    Store ``content`` under ``attributes[namespace][key]``.

    The first value for a key is stored as a string. A second value turns
    it into a list and later values are appended, in document order.
    """
    group = attributes.get(namespace)
    if not isinstance(group, dict):
        group = attributes[namespace] = {}

    if key not in group:
        group[key] = content
    else:
        if not isinstance(group[key], list):
            group[key] = [group[key]]
        group[key].append(content)


class MetaTagParser:
    """
    Collects og:, article:, book: and video: properties from <meta> tags.

    og: properties are set at the top level (last one wins); the other
    namespaces are grouped under a nested mapping named after the namespace.
    Any other property is ignored.
    """

    def __init__(self):
        self.logger = ComponentLogger("meta_tag_parser")

    def parse_html(self, html: Union[str, bytes]) -> Dict:
        """Parse raw HTML text and return the attribute map."""
        return self.parse(load_document(html))

    def parse(self, document: BeautifulSoup) -> Dict:
        """Return the attribute map for an already parsed document."""
        attributes: Dict = {}
        seen = 0

        for prop in self.iter_properties(document):
            seen += 1
            if prop.is_grouped:
                categorize(attributes, prop.namespace.value, prop.key, prop.content)
            else:
                attributes[prop.key] = prop.content

        self.logger.log_action(
            "parse_meta_tags",
            "completed",
            properties=seen,
            keys=list(attributes.keys()),
        )
        return attributes

    def iter_properties(self, document: BeautifulSoup) -> Iterator[MetaProperty]:
        """Yield every recognized meta property in document order."""
        for tag in document.find_all("meta"):
            prop = self._read_property(tag)
            if prop is not None:
                yield prop

    def _read_property(self, tag: Tag) -> Optional[MetaProperty]:
        """Build a MetaProperty from a <meta> tag, or None if unrecognized."""
        name = tag.get("property")
        if name is None:
            return None

        match = _PROPERTY_RE.match(self._as_text(name))
        if not match:
            return None

        return MetaProperty(
            namespace=Namespace(match.group(1).lower()),
            key=normalize_key(match.group(2)),
            content=self._as_text(tag.get("content")),
        )

    @staticmethod
    def _as_text(value: Union[str, List[str], None]) -> str:
        """Attribute values as a string; missing attributes read as ''."""
        if value is None:
            return ""
        if isinstance(value, list):
            return " ".join(value)
        return str(value)
