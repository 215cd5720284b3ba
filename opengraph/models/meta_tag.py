"""
Meta tag model for the Open Graph extractor.
A MetaProperty is one recognized <meta property=... content=...> tag,
already split into namespace and normalized key.
"""
from enum import Enum
from pydantic import BaseModel, Field


class Namespace(str, Enum):
    """Property prefixes the parser recognizes."""
    OG = "og"
    ARTICLE = "article"
    BOOK = "book"
    VIDEO = "video"


# Namespaces whose properties are grouped under a nested mapping
GROUPED_NAMESPACES = (Namespace.ARTICLE, Namespace.BOOK, Namespace.VIDEO)


class MetaProperty(BaseModel):
    """A recognized Open Graph meta tag."""
    namespace: Namespace
    key: str = Field(min_length=1)
    content: str = ""

    @property
    def is_grouped(self) -> bool:
        """True if the property lands in a nested namespace group."""
        return self.namespace in GROUPED_NAMESPACES
