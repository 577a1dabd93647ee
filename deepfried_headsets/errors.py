"""Public error types for Deep Fried Headsets."""

from __future__ import annotations


class DeepFriedHeadsetsError(Exception):
    """Base class for all Deep Fried Headsets errors."""


class ConfigLoadError(DeepFriedHeadsetsError):
    """Raised when the mod config file is missing, unreadable or malformed."""


class CatalogLoadError(DeepFriedHeadsetsError):
    """Raised when the host item catalog cannot be read or has a bad shape."""
