"""
GraphQL types for generated entity forms.
"""

from __future__ import annotations

import graphene


class FieldKindEnum(graphene.Enum):
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

    class Meta:
        name = "EntityFormFieldKind"


class ToOneFieldChoiceEnum(graphene.Enum):
    SELECT = "SELECT"
    RADIO = "RADIO"

    class Meta:
        name = "ToOneFieldChoice"


class ToManyFieldChoiceEnum(graphene.Enum):
    MULTI_SELECT = "MULTI_SELECT"
    MULTI_CHECKBOX = "MULTI_CHECKBOX"

    class Meta:
        name = "ToManyFieldChoice"


class ChoiceOptionType(graphene.ObjectType):
    value = graphene.String(required=True)
    label = graphene.String(required=True)

    class Meta:
        name = "EntityFormChoiceOption"


class EntityFormFieldType(graphene.ObjectType):
    name = graphene.String(required=True)
    kind = FieldKindEnum(required=True)
    label = graphene.String(required=True)
    options = graphene.List(graphene.NonNull(ChoiceOptionType))

    class Meta:
        name = "EntityFormField"


class SubmitActionType(graphene.ObjectType):
    name = graphene.String(required=True)
    value = graphene.String(required=True)

    class Meta:
        name = "EntityFormSubmitAction"


class EntityFormType(graphene.ObjectType):
    entity_type = graphene.String(required=True)
    fields = graphene.List(graphene.NonNull(EntityFormFieldType), required=True)
    submit = graphene.Field(SubmitActionType, required=True)
    version = graphene.String(required=True)

    class Meta:
        name = "EntityForm"
