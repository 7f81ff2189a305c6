"""
Use case helpers: run one directory operation and capture its outcome.

Input: an awaitable returned by a DirectoryClient handle.
Output: Success or Failure.
Side effects: None beyond the awaited call.
Failure cases: never raises for errors coming from the directory client.
"""

import logging
from typing import Any, Awaitable

from adgate.domain.directory.errors import DirectoryError
from adgate.domain.directory.results import Failure, OperationResult, Success

logger = logging.getLogger(__name__)

ACKNOWLEDGED = {"success": True}


def failure_from_error(exc: DirectoryError) -> Failure:
    """Translate a DirectoryError into a Failure."""
    body = {**exc.details, "message": exc.message}
    return Failure(body=body, status=exc.http_status)


async def run_operation(operation: Awaitable[Any]) -> OperationResult:
    """Await a single directory operation.

    Exactly one attempt is made. A DirectoryError keeps its status hint;
    any other exception is logged with its traceback and reported
    without a hint, so it surfaces as the directory being unavailable.

    Args:
        operation: The pending directory call.

    Returns:
        The outcome of the call.
    """
    try:
        data = await operation
    except DirectoryError as exc:
        logger.warning(
            "Directory operation failed: %s (status hint %s)",
            exc.message,
            exc.http_status,
        )
        return failure_from_error(exc)
    except Exception as exc:
        logger.exception("Directory client raised %s", type(exc).__name__)
        return Failure(body={"message": str(exc) or type(exc).__name__})
    return Success(data)


def acknowledge(result: OperationResult, mark_failure: bool = False) -> OperationResult:
    """Replace a successful payload with {"success": true}.

    Args:
        result: The outcome of a mutating operation.
        mark_failure: Also prefix failure bodies with "success": false.
    """
    if isinstance(result, Success):
        return Success(dict(ACKNOWLEDGED))
    if mark_failure:
        return Failure(body={"success": False, **result.body}, status=result.status)
    return result
