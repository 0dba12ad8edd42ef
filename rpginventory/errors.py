"""Exceptions raised by the item engine."""


class InventoryError(Exception):
    """Base class for item engine errors."""


class LoadError(InventoryError):
    """Item configuration is missing or malformed."""
