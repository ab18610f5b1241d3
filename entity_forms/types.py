"""
Data classes describing entity properties and generated form definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .utils.serialization import compute_form_version, to_json_value


class PropertyKind(str, Enum):
    COLUMN = "COLUMN"
    REFERENCE_ONE = "REFERENCE_ONE"
    REFERENCE_MANY = "REFERENCE_MANY"
    OTHER = "OTHER"


class FieldKind(str, Enum):
    DATETIME = "DATETIME"
    DATE = "DATE"
    TIME = "TIME"
    TEXTAREA = "TEXTAREA"
    CHECKBOX = "CHECKBOX"
    EMAIL = "EMAIL"
    PASSWORD = "PASSWORD"
    TEXT = "TEXT"
    SELECT = "SELECT"
    RADIO = "RADIO"
    MULTI_SELECT = "MULTI_SELECT"
    MULTI_CHECKBOX = "MULTI_CHECKBOX"


class ToOneFieldChoice(str, Enum):
    SELECT = "SELECT"
    RADIO = "RADIO"


class ToManyFieldChoice(str, Enum):
    MULTI_SELECT = "MULTI_SELECT"
    MULTI_CHECKBOX = "MULTI_CHECKBOX"


@dataclass(frozen=True)
class PropertyDescriptor:
    """A single declared property of an entity."""
    name: str
    kind: PropertyKind
    declared_type: Optional[str] = None
    is_identifier: bool = False
    target_entity_type: Optional[str] = None  # only for reference kinds


@dataclass(frozen=True)
class FieldSpec:
    """One input field of a generated form."""
    name: str
    kind: FieldKind
    label: str
    options: Optional[dict[Any, str]] = None

    def to_dict(self) -> dict[str, Any]:
        options = None
        if self.options is not None:
            options = [
                {"value": to_json_value(value), "label": str(label)}
                for value, label in self.options.items()
            ]
        return {
            "name": self.name,
            "kind": self.kind.value,
            "label": self.label,
            "options": options,
        }


@dataclass(frozen=True)
class SubmitAction:
    name: str = "save"
    value: str = "save"

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class FormDefinition:
    """
    Ordered form fields generated for one entity type.

    Field order follows the entity's property order; the submit action is
    always rendered after the last field.
    """
    entity_type: str
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)
    submit: SubmitAction = field(default_factory=SubmitAction)

    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def get_field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None

    def __contains__(self, name: object) -> bool:
        return any(spec.name == name for spec in self.fields)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity_type": self.entity_type,
            "fields": [spec.to_dict() for spec in self.fields],
            "submit": self.submit.to_dict(),
        }

    @property
    def version(self) -> str:
        """Deterministic hash of the serialized definition."""
        return compute_form_version(self.to_dict())

    def as_form_class(self, name: Optional[str] = None):
        """Build a ``django.forms.Form`` subclass for this definition."""
        from .builder import build_form_class

        return build_form_class(self, name=name)
