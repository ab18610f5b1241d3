"""
GraphQL queries for generated entity forms.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import graphene
from graphql import GraphQLError

from ..exceptions import EntityFormError
from ..generators import EntityFormGenerator
from .types import EntityFormType, ToManyFieldChoiceEnum, ToOneFieldChoiceEnum

logger = logging.getLogger(__name__)


class EntityFormQuery(graphene.ObjectType):
    entity_form = graphene.Field(
        EntityFormType,
        entity_type=graphene.String(required=True),
        whitelist=graphene.List(graphene.NonNull(graphene.String)),
        blacklist=graphene.List(graphene.NonNull(graphene.String)),
        email_properties=graphene.List(graphene.NonNull(graphene.String)),
        password_properties=graphene.List(graphene.NonNull(graphene.String)),
        to_one_field_choice=ToOneFieldChoiceEnum(),
        to_many_field_choice=ToManyFieldChoiceEnum(),
        description="Generate the input form for an entity type.",
    )

    def resolve_entity_form(
        self,
        info,
        entity_type: str,
        whitelist: Optional[list[str]] = None,
        blacklist: Optional[list[str]] = None,
        email_properties: Optional[list[str]] = None,
        password_properties: Optional[list[str]] = None,
        to_one_field_choice: Any = None,
        to_many_field_choice: Any = None,
    ) -> dict[str, Any]:
        try:
            generator = EntityFormGenerator(
                property_whitelist=whitelist or (),
                property_blacklist=blacklist or (),
                email_properties=email_properties or (),
                password_properties=password_properties or (),
                to_one_field_choice=to_one_field_choice,
                to_many_field_choice=to_many_field_choice,
            )
            definition = generator.generate(entity_type)
        except EntityFormError as exc:
            logger.debug("Entity form generation failed for %s: %s", entity_type, exc)
            raise GraphQLError(str(exc)) from exc

        payload = definition.to_dict()
        payload["version"] = definition.version
        return payload
