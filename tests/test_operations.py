"""
Tests for the directory operation runner and acknowledgements.
"""

import asyncio

from adgate.application.directory.operations import acknowledge, run_operation
from adgate.domain.directory.errors import (
    DirectoryError,
    EntryExistsError,
    EntryNotFoundError,
)
from adgate.domain.directory.results import Failure, Success


async def _returns(value):
    return value


async def _raises(exc):
    raise exc


class TestRunOperation:
    """Tests for run_operation."""

    def test_return_value_is_success(self) -> None:
        assert asyncio.run(run_operation(_returns({"cn": "jdoe"}))) == Success({"cn": "jdoe"})

    def test_none_is_success(self) -> None:
        assert asyncio.run(run_operation(_returns(None))) == Success(None)

    def test_directory_error_keeps_hint(self) -> None:
        """A DirectoryError becomes a Failure with its status hint."""
        result = asyncio.run(run_operation(_raises(EntryNotFoundError("User", "jdoe"))))
        assert result == Failure(body={"message": "User jdoe not found."}, status=404)

    def test_directory_error_details_in_body(self) -> None:
        """Extra details travel next to the message."""
        exc = DirectoryError("Bind failed", code=49)
        result = asyncio.run(run_operation(_raises(exc)))
        assert result.body == {"code": 49, "message": "Bind failed"}
        assert result.status is None

    def test_unexpected_exception_has_no_hint(self) -> None:
        """Any other exception is reported without a status hint."""
        result = asyncio.run(run_operation(_raises(ConnectionError("server down"))))
        assert isinstance(result, Failure)
        assert result.status is None
        assert result.message == "server down"

    def test_exception_without_message_uses_type_name(self) -> None:
        result = asyncio.run(run_operation(_raises(TimeoutError())))
        assert result.message == "TimeoutError"


class TestAcknowledge:
    """Tests for acknowledge."""

    def test_success_replaced(self) -> None:
        assert acknowledge(Success(["ignored"])) == Success({"success": True})

    def test_failure_unchanged_by_default(self) -> None:
        failure = Failure(body={"message": "x"}, status=400)
        assert acknowledge(failure) is failure

    def test_failure_marked_when_requested(self) -> None:
        failure = Failure(body={"message": "x"}, status=400)
        marked = acknowledge(failure, mark_failure=True)
        assert marked == Failure(body={"success": False, "message": "x"}, status=400)

    def test_exists_error_status(self) -> None:
        assert EntryExistsError("Group", "Admins").http_status == 400
