"""
Django app configuration for entity forms.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for the entity forms library."""

    name = "entity_forms"
    verbose_name = "Entity Forms"
    label = "entity_forms"

    def ready(self):
        """Validate the ``ENTITY_FORMS`` setting once the registry is loaded."""
        from .config import get_form_settings

        get_form_settings.cache_clear()
        form_settings = get_form_settings()
        logger.debug(
            "Entity forms ready (to-one: %s, to-many: %s)",
            form_settings.to_one_field_choice.value,
            form_settings.to_many_field_choice.value,
        )
