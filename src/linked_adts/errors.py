"""Exception hierarchy for linked_adts.

Defines all custom exceptions raised by the list and tree types.
"""

from __future__ import annotations


class LinkedADTError(Exception):
    """Base exception for all linked_adts errors."""
    pass


class OutOfRangeError(LinkedADTError, IndexError):
    """Raised when an index falls outside the bounds of a list or position."""
    pass


class MissingNodeError(LinkedADTError, LookupError):
    """Raised when a tree has no node at the requested position."""
    pass


class ConfigError(LinkedADTError):
    """Raised when a demo configuration cannot be loaded."""
    pass
