"""
Errors for the directory bounded context.

Directory client implementations raise DirectoryError (or a subclass)
to report a failed operation. The optional http_status is a hint that
decides the response status; without it the failure is treated as the
directory being unavailable.
No framework imports allowed.
"""

from typing import Any, Optional


class DirectoryError(Exception):
    """Base error for failed directory operations.

    Attributes:
        message: Human-readable description, sent to the caller.
        http_status: Optional status hint for the HTTP response.
        details: Extra fields serialized next to the message.
    """

    def __init__(
        self,
        message: str,
        http_status: Optional[int] = None,
        **details: Any,
    ) -> None:
        self.message = message
        self.http_status = http_status
        self.details = details
        super().__init__(self.message)


class EntryNotFoundError(DirectoryError):
    """Raised when a user, group or organizational unit does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} {name} not found.", http_status=404)
        self.kind = kind
        self.name = name


class EntryExistsError(DirectoryError):
    """Raised when adding an entry that is already present."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} {name} already exists.", http_status=400)
        self.kind = kind
        self.name = name


class DirectoryNotConfiguredError(DirectoryError):
    """Raised when a directory route is hit but no client was loaded."""

    def __init__(self) -> None:
        super().__init__("Directory client is not configured")


class DirectoryClientLoadError(Exception):
    """Raised when the configured directory client cannot be imported or built."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load directory client {path!r}: {reason}")
        self.path = path
        self.reason = reason
