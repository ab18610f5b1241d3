"""
Field rules for single and collection reference properties.
"""

from __future__ import annotations

import logging
from typing import Any

from ..builder import FormBuilder
from ..types import FieldKind, PropertyDescriptor, ToManyFieldChoice, ToOneFieldChoice

logger = logging.getLogger(__name__)


class RelationFieldMixin:
    """Mixin adding reference choice fields to a form builder."""

    def _add_single_reference_field(
        self, builder: FormBuilder, prop: PropertyDescriptor
    ) -> None:
        if self.to_one_field_choice == ToOneFieldChoice.SELECT:
            kind = FieldKind.SELECT
        else:
            kind = FieldKind.RADIO

        options: dict[Any, str] = {
            self.settings.none_option_value: self.settings.none_option_label
        }
        for value, label in self.option_resolver.resolve_options(
            prop.target_entity_type
        ).items():
            options.setdefault(value, label)

        builder.add(prop.name, kind, label=prop.name, options=options)

    def _add_multi_reference_field(
        self, builder: FormBuilder, prop: PropertyDescriptor
    ) -> None:
        if self.to_many_field_choice == ToManyFieldChoice.MULTI_SELECT:
            kind = FieldKind.MULTI_SELECT
        else:
            kind = FieldKind.MULTI_CHECKBOX

        options = self.option_resolver.resolve_options(prop.target_entity_type)
        if not options:
            logger.debug(
                "Skipping %s: no %s rows to choose from.",
                prop.name,
                prop.target_entity_type,
            )
            return

        builder.add(prop.name, kind, label=prop.name, options=options)
