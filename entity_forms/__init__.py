"""
Generate Django forms from model declarations.
"""

from .builder import FormBuilder, build_form_class
from .display import DisplayLabelMixin
from .exceptions import ConfigurationError, EntityFormError, ResolutionError
from .generators import EntityFormGenerator, OptionListResolver
from .introspection import EntityPropertyReader
from .store import DjangoEntityStore
from .types import (
    FieldKind,
    FieldSpec,
    FormDefinition,
    PropertyDescriptor,
    PropertyKind,
    SubmitAction,
    ToManyFieldChoice,
    ToOneFieldChoice,
)

__all__ = [
    "ConfigurationError",
    "DisplayLabelMixin",
    "DjangoEntityStore",
    "EntityFormError",
    "EntityFormGenerator",
    "EntityPropertyReader",
    "FieldKind",
    "FieldSpec",
    "FormBuilder",
    "FormDefinition",
    "OptionListResolver",
    "PropertyDescriptor",
    "PropertyKind",
    "ResolutionError",
    "SubmitAction",
    "ToManyFieldChoice",
    "ToOneFieldChoice",
    "build_form_class",
]
