"""
Field rules for plain column properties.
"""

from __future__ import annotations

from ..builder import FormBuilder
from ..types import FieldKind, PropertyDescriptor

DECLARED_TYPE_FIELD_KINDS: dict[str, FieldKind] = {
    "datetime": FieldKind.DATETIME,
    "date": FieldKind.DATE,
    "time": FieldKind.TIME,
    "text": FieldKind.TEXTAREA,
    "boolean": FieldKind.CHECKBOX,
}


class ColumnFieldMixin:
    """Mixin adding column fields to a form builder."""

    def _add_column_field(self, builder: FormBuilder, prop: PropertyDescriptor) -> None:
        name = prop.name

        # The declared type wins over the email/password overrides.
        kind = DECLARED_TYPE_FIELD_KINDS.get(prop.declared_type or "")
        if kind is not None:
            builder.add(name, kind, label=name)
            return

        if name in self.email_properties:
            builder.add(name, FieldKind.EMAIL, label=name)
        elif name in self.password_properties:
            builder.add(name, FieldKind.PASSWORD, label=name)
            builder.add(
                f"{name}{self.settings.password_repeat_suffix}",
                FieldKind.PASSWORD,
                label=f"{name}{self.settings.password_repeat_label_suffix}",
            )
        else:
            builder.add(name, FieldKind.TEXT, label=name)
