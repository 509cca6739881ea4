from __future__ import annotations

from typing import Iterable, Tuple


class HierarchyError(Exception):
    """Base class for company hierarchy failures."""


class MalformedHierarchyError(HierarchyError, ValueError):
    """Source records do not describe a single rooted tree."""

    def __init__(self, reason: str, codes: Iterable[str] = ()) -> None:
        self.reason = reason
        self.codes: Tuple[str, ...] = tuple(codes)
        message = reason
        if self.codes:
            message = f"{reason}: {', '.join(self.codes)}"
        super().__init__(message)


class NotInitializedError(HierarchyError, RuntimeError):
    """The hierarchy store was queried before a successful build."""


class NotFoundError(HierarchyError, LookupError):
    """No company with the requested code exists in the tree."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Company with code {code} not found")


class RecordLoadError(HierarchyError):
    """A source file could not be read or one of its rows is invalid."""
