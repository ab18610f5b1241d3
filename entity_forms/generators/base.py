"""
EntityFormGenerator implementation.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from ..builder import FormBuilder
from ..config import (
    EntityFormSettings,
    coerce_to_many_choice,
    coerce_to_one_choice,
    get_form_settings,
)
from ..interfaces import EntityStoreProtocol, PropertyReaderProtocol
from ..introspection.property_reader import EntityPropertyReader
from ..introspection.registry import EntityType, get_entity_type_label
from ..store import DjangoEntityStore
from ..types import (
    FormDefinition,
    PropertyDescriptor,
    PropertyKind,
    ToManyFieldChoice,
    ToOneFieldChoice,
)
from .column_fields import ColumnFieldMixin
from .options import OptionListResolver
from .relation_fields import RelationFieldMixin

logger = logging.getLogger(__name__)


class EntityFormGenerator(ColumnFieldMixin, RelationFieldMixin):
    """
    Generates form definitions from an entity's declared properties.

    Configure the generator through its setters (or the matching keyword
    arguments) before calling ``generate()``. Configuration must not change
    while a generation run is in progress.
    """

    def __init__(
        self,
        store: Optional[EntityStoreProtocol] = None,
        reader: Optional[PropertyReaderProtocol] = None,
        *,
        property_blacklist: Iterable[str] = (),
        property_whitelist: Iterable[str] = (),
        email_properties: Iterable[str] = (),
        password_properties: Iterable[str] = (),
        to_one_field_choice: Union[str, ToOneFieldChoice, None] = None,
        to_many_field_choice: Union[str, ToManyFieldChoice, None] = None,
        settings: Optional[EntityFormSettings] = None,
    ) -> None:
        self.settings = settings or get_form_settings()
        self.store = store or DjangoEntityStore()
        self.reader = reader or EntityPropertyReader()
        self.option_resolver = OptionListResolver(self.store)

        self.set_property_blacklist(property_blacklist)
        self.set_property_whitelist(property_whitelist)
        self.set_email_properties(email_properties)
        self.set_password_properties(password_properties)
        self.set_to_one_field_choice(
            to_one_field_choice or self.settings.to_one_field_choice
        )
        self.set_to_many_field_choice(
            to_many_field_choice or self.settings.to_many_field_choice
        )

    def set_property_blacklist(self, blacklist: Iterable[str]) -> None:
        """Exclude these properties from generated forms."""
        self.property_blacklist = frozenset(blacklist)

    def set_property_whitelist(self, whitelist: Iterable[str]) -> None:
        """Only include these properties in generated forms."""
        self.property_whitelist = frozenset(whitelist)

    def set_email_properties(self, email_properties: Iterable[str]) -> None:
        self.email_properties = frozenset(email_properties)

    def set_password_properties(self, password_properties: Iterable[str]) -> None:
        self.password_properties = frozenset(password_properties)

    def set_to_one_field_choice(self, choice: Union[str, ToOneFieldChoice]) -> None:
        self.to_one_field_choice = coerce_to_one_choice(choice)

    def set_to_many_field_choice(self, choice: Union[str, ToManyFieldChoice]) -> None:
        self.to_many_field_choice = coerce_to_many_choice(choice)

    def is_excluded(self, name: str) -> bool:
        use_whitelist = bool(self.property_whitelist)
        use_blacklist = bool(self.property_blacklist)
        return (use_whitelist and name not in self.property_whitelist) or (
            use_blacklist and name in self.property_blacklist
        )

    def generate(self, entity_type: EntityType) -> FormDefinition:
        """Build the form definition for ``entity_type``."""
        label = get_entity_type_label(entity_type)
        properties = self.reader.get_properties(entity_type)

        builder = FormBuilder(label)
        for prop in properties:
            if self.is_excluded(prop.name):
                logger.debug("Excluding property %s.%s.", label, prop.name)
                continue
            self._add_property_field(builder, prop)

        builder.add_submit(self.settings.submit_name, self.settings.submit_value)
        definition = builder.build()

        logger.debug("Generated form for %s with %s fields.", label, len(builder))
        return definition

    def _add_property_field(
        self, builder: FormBuilder, prop: PropertyDescriptor
    ) -> None:
        if prop.kind == PropertyKind.COLUMN:
            if not prop.is_identifier:
                self._add_column_field(builder, prop)
        elif prop.kind == PropertyKind.REFERENCE_ONE:
            self._add_single_reference_field(builder, prop)
        elif prop.kind == PropertyKind.REFERENCE_MANY:
            self._add_multi_reference_field(builder, prop)
