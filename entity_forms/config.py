"""
Entity form configuration settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union

from django.conf import settings as django_settings

from .exceptions import ConfigurationError
from .types import ToManyFieldChoice, ToOneFieldChoice

SETTINGS_NAME = "ENTITY_FORMS"


@dataclass(frozen=True)
class EntityFormSettings:
    to_one_field_choice: ToOneFieldChoice = ToOneFieldChoice.SELECT
    to_many_field_choice: ToManyFieldChoice = ToManyFieldChoice.MULTI_CHECKBOX
    none_option_value: Any = 0
    none_option_label: str = "-none-"
    submit_name: str = "save"
    submit_value: str = "save"
    password_repeat_suffix: str = "2"
    password_repeat_label_suffix: str = " (repeat)"


def coerce_to_one_choice(value: Union[str, ToOneFieldChoice]) -> ToOneFieldChoice:
    try:
        return ToOneFieldChoice(str(getattr(value, "value", value)).upper())
    except ValueError:
        raise ConfigurationError(
            f"Invalid single reference field choice: {value!r}.",
            setting="to_one_field_choice",
        ) from None


def coerce_to_many_choice(value: Union[str, ToManyFieldChoice]) -> ToManyFieldChoice:
    try:
        return ToManyFieldChoice(str(getattr(value, "value", value)).upper())
    except ValueError:
        raise ConfigurationError(
            f"Invalid multi reference field choice: {value!r}.",
            setting="to_many_field_choice",
        ) from None


@lru_cache(maxsize=1)
def get_form_settings() -> EntityFormSettings:
    raw = getattr(django_settings, SETTINGS_NAME, {}) or {}
    defaults = EntityFormSettings()
    return EntityFormSettings(
        to_one_field_choice=coerce_to_one_choice(
            raw.get("to_one_field_choice", defaults.to_one_field_choice)
        ),
        to_many_field_choice=coerce_to_many_choice(
            raw.get("to_many_field_choice", defaults.to_many_field_choice)
        ),
        none_option_value=raw.get("none_option_value", defaults.none_option_value),
        none_option_label=str(raw.get("none_option_label", defaults.none_option_label)),
        submit_name=str(raw.get("submit_name", defaults.submit_name)),
        submit_value=str(raw.get("submit_value", defaults.submit_value)),
        password_repeat_suffix=str(
            raw.get("password_repeat_suffix", defaults.password_repeat_suffix)
        ),
        password_repeat_label_suffix=str(
            raw.get(
                "password_repeat_label_suffix", defaults.password_repeat_label_suffix
            )
        ),
    )
