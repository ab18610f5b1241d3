"""
Form builder accumulating generated fields.

``FormBuilder`` collects ``FieldSpec`` entries in order and produces an
immutable ``FormDefinition``. ``build_form_class`` turns a definition into a
``django.forms.Form`` subclass; fields are never required since validation
rules are not derived from the entity.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from django import forms

from .types import FieldKind, FieldSpec, FormDefinition, SubmitAction


class FormBuilder:
    """Ordered accumulator of form fields for one entity type."""

    def __init__(self, entity_type: str) -> None:
        self.entity_type = entity_type
        self._fields: list[FieldSpec] = []
        self._submit: Optional[SubmitAction] = None

    def __len__(self) -> int:
        return len(self._fields)

    def add(
        self,
        name: str,
        kind: FieldKind,
        *,
        label: Optional[str] = None,
        options: Optional[dict[Any, str]] = None,
    ) -> FieldSpec:
        spec = FieldSpec(
            name=name,
            kind=kind,
            label=name if label is None else label,
            options=dict(options) if options is not None else None,
        )
        self._fields.append(spec)
        return spec

    def add_submit(self, name: str = "save", value: str = "save") -> SubmitAction:
        self._submit = SubmitAction(name=name, value=value)
        return self._submit

    def build(self) -> FormDefinition:
        return FormDefinition(
            entity_type=self.entity_type,
            fields=tuple(self._fields),
            submit=self._submit or SubmitAction(),
        )


def _choices(spec: FieldSpec) -> list[tuple[Any, str]]:
    return [(value, label) for value, label in (spec.options or {}).items()]


def _coerce(spec: FieldSpec) -> Callable[[Any], Any]:
    # Submitted values come back as strings; integer keys are primary keys.
    values = list(spec.options or {})
    if values and all(
        isinstance(value, int) and not isinstance(value, bool) for value in values
    ):
        return int
    return str


FIELD_KIND_FACTORIES: dict[FieldKind, Callable[[FieldSpec], forms.Field]] = {
    FieldKind.DATETIME: lambda s: forms.DateTimeField(
        label=s.label,
        required=False,
        widget=forms.DateTimeInput(attrs={"type": "datetime-local"}),
    ),
    FieldKind.DATE: lambda s: forms.DateField(
        label=s.label, required=False, widget=forms.DateInput(attrs={"type": "date"})
    ),
    FieldKind.TIME: lambda s: forms.TimeField(
        label=s.label, required=False, widget=forms.TimeInput(attrs={"type": "time"})
    ),
    FieldKind.TEXTAREA: lambda s: forms.CharField(
        label=s.label, required=False, widget=forms.Textarea
    ),
    FieldKind.CHECKBOX: lambda s: forms.BooleanField(label=s.label, required=False),
    FieldKind.EMAIL: lambda s: forms.EmailField(label=s.label, required=False),
    FieldKind.PASSWORD: lambda s: forms.CharField(
        label=s.label, required=False, widget=forms.PasswordInput
    ),
    FieldKind.TEXT: lambda s: forms.CharField(label=s.label, required=False),
    FieldKind.SELECT: lambda s: forms.TypedChoiceField(
        label=s.label,
        required=False,
        choices=_choices(s),
        coerce=_coerce(s),
        widget=forms.Select,
    ),
    FieldKind.RADIO: lambda s: forms.TypedChoiceField(
        label=s.label,
        required=False,
        choices=_choices(s),
        coerce=_coerce(s),
        widget=forms.RadioSelect,
    ),
    FieldKind.MULTI_SELECT: lambda s: forms.TypedMultipleChoiceField(
        label=s.label,
        required=False,
        choices=_choices(s),
        coerce=_coerce(s),
        widget=forms.SelectMultiple,
    ),
    FieldKind.MULTI_CHECKBOX: lambda s: forms.TypedMultipleChoiceField(
        label=s.label,
        required=False,
        choices=_choices(s),
        coerce=_coerce(s),
        widget=forms.CheckboxSelectMultiple,
    ),
}


def build_form_field(spec: FieldSpec) -> forms.Field:
    """Create the ``django.forms`` field for a single field spec."""
    factory = FIELD_KIND_FACTORIES.get(spec.kind)
    if not factory:
        raise ValueError(f"Unknown field kind: {spec.kind}")
    return factory(spec)


def build_form_class(
    definition: FormDefinition, name: Optional[str] = None
) -> type[forms.Form]:
    """Create a ``django.forms.Form`` subclass from a form definition."""
    attrs: dict[str, Any] = {
        spec.name: build_form_field(spec) for spec in definition.fields
    }
    attrs["submit_action"] = definition.submit
    attrs["form_definition"] = definition
    class_name = name or "{}Form".format(definition.entity_type.rsplit(".", 1)[-1])
    return type(class_name, (forms.Form,), attrs)
