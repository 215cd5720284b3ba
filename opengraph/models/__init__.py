"""Models package initialization."""
from opengraph.models.graph_object import AttributeGroup, GraphObject, TYPES, MANDATORY_ATTRIBUTES
from opengraph.models.meta_tag import MetaProperty, Namespace

__all__ = ["AttributeGroup", "GraphObject", "TYPES", "MANDATORY_ATTRIBUTES", "MetaProperty", "Namespace"]
