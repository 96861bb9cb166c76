"""Exception hierarchy for trycatch.

Failures of wrapped operations are never raised; they become ``Failure``
values. These exceptions only describe misuse of the library itself.
"""

from __future__ import annotations


class TryCatchError(Exception):
    """Base exception for all trycatch errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnsupportedOperationError(TryCatchError, TypeError):
    """The operation is neither an awaitable nor a callable."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        operation_type: type | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.operation_type = operation_type
