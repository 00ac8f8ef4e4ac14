"""Custom exception hierarchy for shavtzak."""

from __future__ import annotations


class ShavtzakError(Exception):
    """Base exception for all shavtzak errors."""


class RosterConfigError(ShavtzakError):
    """Invalid or missing configuration."""


class RosterValidationError(ShavtzakError):
    """A form value failed its field rule."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class RosterImportError(ShavtzakError):
    """An import payload could not be parsed into a roster snapshot.

    The store is never touched when this is raised; callers surface the
    message to the user and keep the current state.
    """


class StorageError(ShavtzakError):
    """Blob store read or write failure."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)
