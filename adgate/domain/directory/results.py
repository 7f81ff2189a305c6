"""
Operation results for the directory bounded context.

Every directory call ends in exactly one of two variants:
Success carrying the returned payload, or Failure carrying the error
body and an optional HTTP status hint. Both are immutable.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

STATUS_HINT_KEY = "httpStatus"


@dataclass(frozen=True)
class Success:
    """A directory call that returned normally.

    Attributes:
        data: The returned payload (object, array, boolean) or None.
    """

    data: Any = None


@dataclass(frozen=True)
class Failure:
    """A directory call that failed.

    Attributes:
        body: Error fields sent to the caller, usually including "message".
        status: HTTP status hint, or None when the failure carries none.
    """

    body: Mapping[str, Any] = field(default_factory=dict)
    status: Optional[int] = None

    @classmethod
    def from_error(cls, error: Mapping[str, Any]) -> "Failure":
        """Build a failure from a legacy error object.

        The httpStatus key, when present and truthy, becomes the status
        hint and is left out of the body.
        """
        body = {key: value for key, value in error.items() if key != STATUS_HINT_KEY}
        status = error.get(STATUS_HINT_KEY) or None
        return cls(body=body, status=status)

    @property
    def message(self) -> Optional[str]:
        return self.body.get("message")


OperationResult = Union[Success, Failure]


def result_from_pair(
    error: Optional[Mapping[str, Any]], data: Any = None
) -> OperationResult:
    """Collapse a legacy (error, data) pair into a single result.

    The error wins when both are present, which hides any partial data
    returned alongside it.
    """
    if error is not None:
        return Failure.from_error(error)
    return Success(data)
