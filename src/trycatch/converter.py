"""Convert raised exceptions into ``Success``/``Failure`` values.

Two forms share one contract: the caller never needs ``try``/``except`` to
inspect the outcome.

- ``try_catch_async(awaitable)`` returns a coroutine that always completes
  with a result, even when the awaitable fails.
- ``try_catch_sync(fn)`` calls ``fn()`` once and returns a result directly.

``try_catch`` picks between them from the runtime shape of its argument.
Only ``Exception`` subclasses are captured. Other ``BaseException``s,
``asyncio.CancelledError`` included, propagate untouched.

Results are typed with the default error type (``Exception``). Annotate the
receiving variable as ``Result[T, MyError]`` to narrow it.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, overload

from trycatch.errors import UnsupportedOperationError
from trycatch.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from trycatch.result import AsyncResult, Result

logger = logging.getLogger(__name__)


def _consume_future_exception(fut: asyncio.Future[Any]) -> None:
    """Avoid 'Future exception was never retrieved' when nobody awaits *fut*."""
    try:
        _ = fut.exception()
    except asyncio.CancelledError:
        return


async def _settle[T](operation: Awaitable[T]) -> Result[T]:
    try:
        value = await operation
    except Exception as exc:
        logger.debug("Captured %s from awaitable", type(exc).__name__)
        return Failure(exc)
    return Success(value)


def try_catch_async[T](operation: Awaitable[T]) -> AsyncResult[T]:
    """Observe *operation* and capture its outcome.

    Futures and tasks are shielded as soon as this is called: cancelling or
    timing out the returned coroutine never cancels them, and their failure
    is marked as retrieved even if the coroutine is dropped. A bare
    coroutine has no owner besides the converter, so it runs (and is
    cancelled) with the returned coroutine.

    Args:
        operation: A coroutine, future, task or any other awaitable. It is
            observed, not restarted: work already in flight keeps running.

    Returns:
        A coroutine resolving to ``Success(value)`` when *operation*
        completes, or ``Failure(exc)`` when awaiting it raises. The captured
        exception is the same object that was raised.

    Example:
        result = await try_catch_async(client.get("/users/1"))
        if isinstance(result, Failure):
            log.warning("fetch failed: %s", result.error)
    """
    if asyncio.isfuture(operation):
        shielded = asyncio.shield(operation)
        shielded.add_done_callback(_consume_future_exception)
        return _settle(shielded)
    return _settle(operation)


def try_catch_sync[T](operation: Callable[[], T]) -> Result[T]:
    """Call *operation* once and capture its outcome.

    A returned awaitable is treated as the value: it is neither awaited nor
    flattened.

    Example:
        data, error = try_catch_sync(lambda: json.loads(payload))
    """
    try:
        value = operation()
    except Exception as exc:
        logger.debug("Captured %s from callable", type(exc).__name__)
        return Failure(exc)
    return Success(value)


@overload
def try_catch[T](operation: Awaitable[T]) -> AsyncResult[T]: ...


@overload
def try_catch[T](operation: Callable[[], T]) -> Result[T]: ...


def try_catch(operation: Any) -> Any:
    """Capture the outcome of an awaitable or a zero-argument callable.

    Awaitables are checked first, so an object that is both awaitable and
    callable is awaited rather than called.

    Raises:
        UnsupportedOperationError: *operation* is neither awaitable nor
            callable. Raised immediately; nothing is run.
    """
    if inspect.isawaitable(operation):
        return try_catch_async(operation)
    if callable(operation):
        return try_catch_sync(operation)
    raise UnsupportedOperationError(
        f"try_catch expects an awaitable or a zero-argument callable, "
        f"got {type(operation).__name__}",
        hint="Pass the coroutine itself (try_catch(fetch())) or wrap sync work "
        "in a lambda (try_catch(lambda: parse(text))).",
        operation_type=type(operation),
    )
