"""Result variants returned by the converter.

A result is either a ``Success`` carrying ``data`` or a ``Failure`` carrying
``error``. Both variants expose both fields so call sites can unpack them the
same way regardless of outcome:

    data, error = try_catch(lambda: json.loads(payload))
    if error is not None:
        ...

The tag is the variant class (equivalently ``error is None``), never the
truthiness of ``data``: ``Success(None)`` is a success.
"""

from __future__ import annotations

from collections.abc import Coroutine, Iterator
import dataclasses
from typing import Any, TypeIs


@dataclasses.dataclass(frozen=True, slots=True)
class Success[T]:
    """The operation completed normally."""

    data: T
    error: None = dataclasses.field(default=None, init=False)

    def __iter__(self) -> Iterator[Any]:
        yield self.data
        yield self.error

    def as_dict(self) -> dict[str, Any]:
        """Return the ``{"data": ..., "error": None}`` shape."""
        return {"data": self.data, "error": None}


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[E = Exception]:
    """The operation raised; ``error`` is the exception object itself."""

    error: E
    data: None = dataclasses.field(default=None, init=False)

    def __post_init__(self) -> None:
        """Reject a failure with no error; it would be indistinguishable."""
        if self.error is None:
            raise ValueError("Failure.error must not be None")

    def __iter__(self) -> Iterator[Any]:
        yield self.data
        yield self.error

    def as_dict(self) -> dict[str, Any]:
        """Return the ``{"data": None, "error": ...}`` shape."""
        return {"data": None, "error": self.error}


type Result[T, E = Exception] = Success[T] | Failure[E]

#: What the asynchronous form hands back: await it to get a ``Result``.
type AsyncResult[T, E = Exception] = Coroutine[Any, Any, Result[T, E]]


def is_success[T, E](result: Result[T, E]) -> TypeIs[Success[T]]:
    """Return True when *result* is a ``Success``."""
    return isinstance(result, Success)


def is_failure[T, E](result: Result[T, E]) -> TypeIs[Failure[E]]:
    """Return True when *result* is a ``Failure``."""
    return isinstance(result, Failure)
