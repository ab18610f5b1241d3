"""
Display label capability for entities used as reference targets.
"""

from __future__ import annotations

from typing import Any, Optional

from .exceptions import ConfigurationError
from .introspection.registry import get_entity_type_label


class DisplayLabelMixin:
    """
    Provide ``display_label()`` from a named attribute.

    Models set ``display_name_property`` to the attribute holding the text
    shown for a row in reference option lists::

        class Department(DisplayLabelMixin, models.Model):
            display_name_property = "name"
            name = models.CharField(max_length=100)
    """

    display_name_property: Optional[str] = None

    def display_label(self) -> str:
        attribute = type(self).display_name_property
        try:
            value = getattr(self, attribute)
        except AttributeError:
            raise ConfigurationError(
                f"Display name property '{attribute}' does not exist.",
                entity_type=get_entity_type_label(type(self)),
                setting="display_name_property",
            ) from None
        if callable(value):
            value = value()
        return str(value)


def ensure_display_label(entity_type: Any) -> None:
    """Raise ``ConfigurationError`` unless rows of ``entity_type`` can be labelled."""
    label = get_entity_type_label(entity_type)
    accessor = getattr(entity_type, "display_label", None)
    if not callable(accessor):
        raise ConfigurationError(
            f"Entity type '{label}' does not implement display_label().",
            entity_type=label,
        )

    uses_mixin_accessor = (
        isinstance(entity_type, type)
        and issubclass(entity_type, DisplayLabelMixin)
        and entity_type.display_label is DisplayLabelMixin.display_label
    )
    if uses_mixin_accessor and not entity_type.display_name_property:
        raise ConfigurationError(
            f"Entity type '{label}' does not declare display_name_property.",
            entity_type=label,
            setting="display_name_property",
        )
