"""trycatch: exceptions in, result values out.

Public API:
    - try_catch(): Capture an awaitable or a zero-argument callable
    - try_catch_async() / try_catch_sync(): The two forms, named explicitly
    - Success, Failure, Result: The values handed back

Example:
    result = await try_catch(fetch_user(123))
    if result.error is not None:
        print("Request failed:", result.error)
    else:
        print("Received:", result.data)

    data, error = try_catch(lambda: json.loads(payload))
"""

from __future__ import annotations

import logging

from trycatch.converter import try_catch, try_catch_async, try_catch_sync
from trycatch.errors import TryCatchError, UnsupportedOperationError
from trycatch.result import (
    AsyncResult,
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("trycatch")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("trycatch").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Converter
    "try_catch",
    "try_catch_async",
    "try_catch_sync",
    # Results
    "Success",
    "Failure",
    "Result",
    "AsyncResult",
    "is_success",
    "is_failure",
    # Errors
    "TryCatchError",
    "UnsupportedOperationError",
    "__version__",
]
