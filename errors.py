"""
errors.py
---------
Exception hierarchy for the data layer.

Callers distinguish three outcomes of every operation: success, "not found"
(returned as ``None``/``False`` or raised as NotFoundError), and failure
(one of the remaining exceptions below).
"""

from typing import Any, Optional


class DataLayerError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(DataLayerError):
    """Malformed key, unknown resource kind/column, or bad payload."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DataLayerError):
    """No row matches the requested key."""

    def __init__(self, kind: str, key: Any):
        super().__init__(f"{kind} with ID {key} not found")
        self.kind = kind
        self.key = key


class CodecError(DataLayerError):
    """An integer-array column value could not be decoded or encoded."""


class StoreError(DataLayerError):
    """Any other backing-store failure (connectivity, constraints, ...)."""
