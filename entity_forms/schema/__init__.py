"""
Entity form GraphQL schema components.
"""

from .queries import EntityFormQuery

__all__ = ["EntityFormQuery"]
