"""Exception hierarchy for corpus loading and name synthesis."""

from __future__ import annotations

from typing import Optional


class NameForgeError(Exception):
    """Base class for every error raised by :mod:`name_forge`."""


class DataError(NameForgeError):
    """Raised when a corpus or output table row cannot be used.

    Loads are all-or-nothing: the first malformed row aborts the whole load.
    """

    def __init__(self, message: str, *, row: Optional[int] = None) -> None:
        self.row = row
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)


class EmptyPoolError(NameForgeError):
    """Raised when a weighted pool has no members left to sample from."""

    def __init__(self, pool_name: str) -> None:
        self.pool_name = pool_name
        super().__init__(f"weighted pool '{pool_name}' has no eligible segments")


__all__ = ["NameForgeError", "DataError", "EmptyPoolError"]
