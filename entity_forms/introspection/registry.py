"""
Resolution of entity type identifiers to Django models.
"""

from __future__ import annotations

from typing import Any, Union

from django.apps import apps
from django.db import models

from ..exceptions import ResolutionError

EntityType = Union[str, type[models.Model]]


def get_entity_type_label(entity_type: Any) -> str:
    """Return the ``app_label.ModelName`` identifier of a model or label."""
    meta = getattr(entity_type, "_meta", None)
    if meta is not None:
        return f"{meta.app_label}.{entity_type.__name__}"
    return str(entity_type)


def resolve_entity_type(entity_type: EntityType) -> type[models.Model]:
    """Resolve a model class or ``app_label.ModelName`` string to a model."""
    if isinstance(entity_type, type) and issubclass(entity_type, models.Model):
        return entity_type

    label = str(entity_type or "").strip()
    try:
        return apps.get_model(label)
    except (LookupError, ValueError):
        raise ResolutionError(
            f"Entity type '{label}' not found.", entity_type=label
        ) from None
