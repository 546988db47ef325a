"""Screens (contexts) and the registry that owns them."""

from .base import Context, ContextId
from .main import MainContext
from .registry import ContextRegistry
from .tagging import TaggingContext

__all__ = [
    "Context",
    "ContextId",
    "ContextRegistry",
    "MainContext",
    "TaggingContext",
]
