"""
Graph object model for the Open Graph extractor.
Wraps the attribute map built by the meta tag parser and classifies it
against the fixed Open Graph schema table.
"""
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Union

GroupValue = Union[str, List[str]]
AttributeValue = Union[str, "AttributeGroup"]

# Schema name -> type literals. Declaration order is significant for lookups.
TYPES: Dict[str, tuple] = {
    "activity": ("activity", "sport"),
    "business": ("bar", "company", "cafe", "hotel", "restaurant"),
    "group": ("cause", "sports_league", "sports_team"),
    "organization": ("band", "government", "non_profit", "school", "university"),
    "person": ("actor", "athlete", "author", "director", "musician", "politician", "public_figure"),
    "place": ("city", "country", "landmark", "state_province"),
    "product": ("album", "book", "drink", "food", "game", "movie", "product", "song", "tv_show"),
    "website": ("blog", "website"),
}

MANDATORY_ATTRIBUTES = ("title", "type", "image", "url")


class AttributeGroup(Mapping):
    """
    Read-only view of one namespace group (``article``, ``book``, ``video``).

    Repeated properties are stored as tuples and handed out as fresh lists,
    so callers can't change the group through a returned value.
    """

    def __init__(self, values: Optional[Mapping] = None):
        self._values: Dict[str, Union[str, tuple]] = {
            key: tuple(value) if isinstance(value, (list, tuple)) else value
            for key, value in (values or {}).items()
        }

    def __getitem__(self, key: str) -> GroupValue:
        value = self._values[key]
        return list(value) if isinstance(value, tuple) else value

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __repr__(self) -> str:
        return f"AttributeGroup({dict(self.items())!r})"


class GraphObject(Mapping):
    """
    Read-only mapping over the Open Graph attributes of one page.

    Values are plain strings for top-level ``og:`` properties and
    :class:`AttributeGroup` views for the ``article``, ``book`` and ``video``
    groups. Attributes can be read as keys (``obj["title"]``) or as
    attributes (``obj.title``, ``obj.article.tag``); unknown attributes read
    as ``None``, except ``is_*`` names that aren't type or schema predicates.
    """

    def __init__(self, attributes: Optional[Mapping] = None):
        self._attributes: Dict[str, AttributeValue] = {
            key: AttributeGroup(value) if isinstance(value, Mapping) else value
            for key, value in (attributes or {}).items()
        }

    def __getitem__(self, key: str) -> AttributeValue:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails; predicates are class attributes
        if name.startswith("_") or name.startswith("is_"):
            raise AttributeError(f"{self.__class__.__name__!r} object has no attribute {name!r}")
        return self._attributes.get(name)

    def __repr__(self) -> str:
        return f"GraphObject({self._attributes!r})"

    @property
    def type(self) -> Optional[str]:
        """The object type, e.g. ``movie`` or ``website``."""
        return self._attributes.get("type")

    @property
    def schema(self) -> Optional[str]:
        """
        The schema this object's type belongs to.

        One of the keys of ``TYPES``, or None when the type is missing or
        not listed in any schema.
        """
        for schema, types in TYPES.items():
            if self.type in types:
                return schema
        return None

    def is_type(self, literal: str) -> bool:
        """True if the object type is exactly ``literal``."""
        return self.type == literal

    def is_schema(self, name: str) -> bool:
        """True if the type is the schema name itself or one of its types."""
        return self.type == name or self.type in TYPES.get(name, ())

    def missing_attributes(self) -> List[str]:
        """Mandatory attributes that are absent or empty, in mandatory order."""
        return [a for a in MANDATORY_ATTRIBUTES if not self._attributes.get(a)]

    def valid(self) -> bool:
        """False if any of the mandatory attributes is absent or empty."""
        for attribute in MANDATORY_ATTRIBUTES:
            if not self._attributes.get(attribute):
                return False
        return True


def _type_predicate(literal: str):
    def predicate(self: GraphObject) -> bool:
        return self.is_type(literal)
    predicate.__name__ = f"is_{literal}"
    predicate.__doc__ = f"True if the object type is ``{literal}``."
    return predicate


def _schema_predicate(name: str):
    def predicate(self: GraphObject) -> bool:
        return self.is_schema(name)
    predicate.__name__ = f"is_{name}"
    predicate.__doc__ = f"True if the object belongs to the ``{name}`` schema."
    return predicate


# Schema predicates are bound last so they win where a literal is both
# a type and a schema name (activity, product, website).
for _types in TYPES.values():
    for _literal in _types:
        setattr(GraphObject, f"is_{_literal}", _type_predicate(_literal))
for _name in TYPES:
    setattr(GraphObject, f"is_{_name}", _schema_predicate(_name))
del _types, _literal, _name
