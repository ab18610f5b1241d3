"""
Property reader producing ordered property descriptors for a model.
"""

from __future__ import annotations

from typing import Any

from django.db import models

from ..types import PropertyDescriptor, PropertyKind
from .registry import EntityType, get_entity_type_label, resolve_entity_type
from .type_mapping import map_declared_type


class EntityPropertyReader:
    """Reads declared properties from ``Model._meta``."""

    def get_properties(self, entity_type: EntityType) -> list[PropertyDescriptor]:
        model = resolve_entity_type(entity_type)
        return [self._describe(field) for field in model._meta.get_fields()]

    def _describe(self, field: Any) -> PropertyDescriptor:
        name = field.name if hasattr(field, "name") else field.get_accessor_name()
        kind = self._get_kind(field)

        if kind is PropertyKind.COLUMN:
            return PropertyDescriptor(
                name=name,
                kind=kind,
                declared_type=map_declared_type(field),
                is_identifier=bool(getattr(field, "primary_key", False)),
            )

        if kind is PropertyKind.OTHER:
            return PropertyDescriptor(name=name, kind=kind)

        return PropertyDescriptor(
            name=name,
            kind=kind,
            is_identifier=bool(getattr(field, "primary_key", False)),
            target_entity_type=get_entity_type_label(field.related_model),
        )

    @staticmethod
    def _get_kind(field: Any) -> PropertyKind:
        if not field.is_relation:
            return PropertyKind.COLUMN if field.concrete else PropertyKind.OTHER

        # Reverse relations and generic relations are not editable from this side.
        if field.auto_created and not field.concrete:
            return PropertyKind.OTHER
        if field.related_model is None or not isinstance(field, models.Field):
            return PropertyKind.OTHER
        if getattr(field.remote_field, "parent_link", False):
            return PropertyKind.OTHER

        if field.many_to_many:
            return PropertyKind.REFERENCE_MANY
        if field.many_to_one or field.one_to_one:
            return PropertyKind.REFERENCE_ONE
        return PropertyKind.OTHER
