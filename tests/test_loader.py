"""
Tests for loading the configured directory client.
"""

import pytest

from adgate.domain.directory.errors import DirectoryClientLoadError
from adgate.infrastructure.directory.loader import (
    load_directory_client,
    resolve_client_class,
)
from fakes import FakeDirectory


class TestResolveClientClass:
    """Tests for resolve_client_class."""

    def test_explicit_class(self) -> None:
        assert resolve_client_class("fakes:FakeDirectory") is FakeDirectory

    def test_module_with_single_client(self) -> None:
        """A bare module path picks its only DirectoryClient subclass."""
        assert resolve_client_class("fakes") is FakeDirectory

    def test_missing_module(self) -> None:
        with pytest.raises(DirectoryClientLoadError, match="no_such_module"):
            resolve_client_class("no_such_module:Client")

    def test_class_is_not_a_client(self) -> None:
        with pytest.raises(DirectoryClientLoadError, match="not a DirectoryClient"):
            resolve_client_class("fakes:FakeUser")

    def test_module_without_client(self) -> None:
        with pytest.raises(DirectoryClientLoadError, match="no DirectoryClient subclass"):
            resolve_client_class("json")


class TestLoadDirectoryClient:
    """Tests for load_directory_client."""

    def test_unset_path_returns_none(self) -> None:
        assert load_directory_client(None) is None

    def test_options_passed_to_constructor(self) -> None:
        client = load_directory_client("fakes:FakeDirectory", {"base_dn": "dc=example,dc=com"})
        assert isinstance(client, FakeDirectory)
        assert client.options == {"base_dn": "dc=example,dc=com"}

    def test_constructor_failure_wrapped(self) -> None:
        """Bad options surface as a load error naming the path."""
        with pytest.raises(DirectoryClientLoadError, match="construction failed"):
            load_directory_client("fakes:FakeDirectory", {"self": 2})
