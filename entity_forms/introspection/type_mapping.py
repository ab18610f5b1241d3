"""
Declared type mapping for model columns.
"""

from __future__ import annotations

from typing import Optional

from django.db import models

# Django internal field type -> declared column type
DECLARED_TYPE_MAP: dict[str, str] = {
    "AutoField": "integer",
    "BigAutoField": "bigint",
    "SmallAutoField": "smallint",
    "CharField": "string",
    "SlugField": "string",
    "FilePathField": "string",
    "FileField": "string",
    "ImageField": "string",
    "GenericIPAddressField": "string",
    "IPAddressField": "string",
    "TextField": "text",
    "IntegerField": "integer",
    "PositiveIntegerField": "integer",
    "SmallIntegerField": "smallint",
    "PositiveSmallIntegerField": "smallint",
    "BigIntegerField": "bigint",
    "PositiveBigIntegerField": "bigint",
    "FloatField": "float",
    "DecimalField": "decimal",
    "BooleanField": "boolean",
    "NullBooleanField": "boolean",
    "DateField": "date",
    "DateTimeField": "datetime",
    "TimeField": "time",
    "DurationField": "dateinterval",
    "UUIDField": "guid",
    "JSONField": "json",
    "BinaryField": "blob",
}


def map_declared_type(field: models.Field) -> Optional[str]:
    """Map a Django model field to its declared column type, if known."""
    output_field = getattr(field, "output_field", None)
    if output_field is not None and type(field).__name__ == "GeneratedField":
        return map_declared_type(output_field)

    try:
        internal_type = field.get_internal_type()
    except AttributeError:
        return None
    return DECLARED_TYPE_MAP.get(internal_type)
