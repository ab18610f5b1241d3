"""
Entity store backed by the Django ORM.
"""

from __future__ import annotations

from typing import Any

from django.db import models

from .introspection.registry import EntityType, resolve_entity_type


class DjangoEntityStore:
    """Reads rows of an entity type through its default manager."""

    def __init__(self, using: str | None = None) -> None:
        self.using = using

    def get_entity_type(self, entity_type: EntityType) -> type[models.Model]:
        return resolve_entity_type(entity_type)

    def find_all(self, entity_type: EntityType) -> list[Any]:
        """Return every row of ``entity_type`` ordered by ascending primary key."""
        model = self.get_entity_type(entity_type)
        queryset = model._default_manager.all()
        if self.using:
            queryset = queryset.using(self.using)
        return list(queryset.order_by("pk"))
