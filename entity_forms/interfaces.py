"""
Collaborator interfaces consumed by the form generator.
"""

from typing import Any, Iterable, Protocol

from .types import PropertyDescriptor


class PropertyReaderProtocol(Protocol):
    def get_properties(self, entity_type: Any) -> list[PropertyDescriptor]:
        ...


class EntityStoreProtocol(Protocol):
    def get_entity_type(self, entity_type: Any) -> type:
        ...

    def find_all(self, entity_type: Any) -> Iterable[Any]:
        ...
