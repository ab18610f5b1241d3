"""
Exceptions raised while generating entity forms.
"""

from typing import Optional


class EntityFormError(Exception):
    """Base exception for entity form generation errors."""

    def __init__(self, message: str, entity_type: Optional[str] = None):
        self.entity_type = entity_type
        super().__init__(message)


class ResolutionError(EntityFormError):
    """Raised when an entity type identifier cannot be resolved to a model."""

    pass


class ConfigurationError(EntityFormError):
    """Raised when an entity or generator is configured incorrectly."""

    def __init__(
        self,
        message: str,
        entity_type: Optional[str] = None,
        setting: Optional[str] = None,
    ):
        self.setting = setting
        super().__init__(message, entity_type)
