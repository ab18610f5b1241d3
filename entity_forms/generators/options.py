"""
Option list resolution for reference fields.
"""

from __future__ import annotations

import logging
from typing import Any

from ..display import ensure_display_label
from ..interfaces import EntityStoreProtocol

logger = logging.getLogger(__name__)


class OptionListResolver:
    """Builds ``{pk: display label}`` mappings for reference targets."""

    def __init__(self, store: EntityStoreProtocol) -> None:
        self.store = store

    def resolve_options(self, target_entity_type: Any) -> dict[Any, str]:
        """
        Return every row of ``target_entity_type`` keyed by primary key.

        Rows are ordered by ascending primary key and labelled through the
        target's ``display_label()``. A target without that capability raises
        ``ConfigurationError`` before any row is read.
        """
        model = self.store.get_entity_type(target_entity_type)
        ensure_display_label(model)

        options: dict[Any, str] = {}
        for row in self.store.find_all(target_entity_type):
            options[row.pk] = str(row.display_label())

        logger.debug(
            "Resolved %s options for %s.", len(options), target_entity_type
        )
        return options
