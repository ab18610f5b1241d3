"""
Entity introspection for form generation.
"""

from .property_reader import EntityPropertyReader
from .registry import get_entity_type_label, resolve_entity_type
from .type_mapping import map_declared_type

__all__ = [
    "EntityPropertyReader",
    "get_entity_type_label",
    "map_declared_type",
    "resolve_entity_type",
]
