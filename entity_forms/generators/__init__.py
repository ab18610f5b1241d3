"""
Form generation from entity properties.
"""

from .base import EntityFormGenerator
from .options import OptionListResolver

__all__ = ["EntityFormGenerator", "OptionListResolver"]
