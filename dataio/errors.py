"""
Typed errors raised by dataio readers, writers and helpers.

Every error derives from ``DataIOError`` and from the closest built-in
exception, so callers can catch either the library-specific type or the
usual Python one (``FileNotFoundError``, ``TypeError``, ``ValueError``,
``OSError``).
"""

from typing import Any, Optional, Sequence


class DataIOError(Exception):
    """Base class for all dataio failures."""

    pass


class SourceNotFoundError(DataIOError, FileNotFoundError):
    """Raised when a file, directory, worksheet or table is missing and
    auto-creation is disabled."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        available: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.available = list(available) if available is not None else None

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.available is not None:
            names = ", ".join(self.available) or "<none>"
            message = f"{message} (available: {names})"
        return message


class UnsupportedTypeError(DataIOError, TypeError):
    """Raised when a polymorphic call names a type the adapter is not bound
    to."""

    def __init__(self, requested: Any, supported: Sequence[type]) -> None:
        self.requested = requested
        self.supported = tuple(supported)
        requested_name = getattr(requested, "__name__", repr(requested))
        supported_names = ", ".join(t.__name__ for t in self.supported)
        super().__init__(
            f"Type {requested_name} is not supported "
            f"(supported: {supported_names})."
        )


class SerializationError(DataIOError, ValueError):
    """Raised when stored data cannot be decoded into the bound type."""

    pass


class WriteError(DataIOError, OSError):
    """Raised when persisting data to the storage medium fails."""

    pass
