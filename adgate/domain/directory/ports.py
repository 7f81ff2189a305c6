"""
Port interfaces (ABCs) for the directory bounded context.

The gateway never speaks a directory protocol itself. A concrete
DirectoryClient (loaded at startup) implements these contracts and
returns plain JSON-serializable values: dicts, lists or booleans.
Failures are reported by raising DirectoryError.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

Options = dict[str, Any]
Attributes = dict[str, Any]


class EntityQueryPort(ABC):
    """Read-only access to a class of directory objects."""

    @abstractmethod
    async def get(self, options: Optional[Options] = None) -> Any:
        """Return matching entries, or a single entry when the handle is named."""
        raise NotImplementedError


class EntityPort(EntityQueryPort):
    """Handle on a named entry, or on the collection when unnamed."""

    @abstractmethod
    async def add(self, attributes: Attributes) -> Any:
        """Create a new entry from the given attributes."""
        raise NotImplementedError

    @abstractmethod
    async def exists(self) -> bool:
        """Return whether the named entry exists."""
        raise NotImplementedError

    @abstractmethod
    async def remove(self) -> Any:
        """Delete the named entry."""
        raise NotImplementedError


class UserPort(EntityPort):
    """Operations on directory user accounts."""

    @abstractmethod
    async def is_member_of(self, group: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def authenticate(self, password: Optional[str]) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def update(self, attributes: Attributes) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def set_password(self, password: Optional[str]) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def password_never_expires(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def password_expires(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def enable(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def disable(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def move(self, location: Optional[str]) -> Any:
        """Move the account to another container (e.g. an OU path)."""
        raise NotImplementedError

    @abstractmethod
    async def add_to_group(self, group: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def remove_from_group(self, group: str) -> Any:
        raise NotImplementedError


class GroupPort(EntityPort):
    """Operations on directory groups."""


class OrganizationalUnitPort(EntityPort):
    """Operations on organizational units."""


class DirectoryClient(ABC):
    """Entry point of a directory library.

    Implementations are constructed with the keyword options from
    settings.directory_options.
    """

    @abstractmethod
    def user(self, name: Optional[str] = None) -> UserPort:
        raise NotImplementedError

    @abstractmethod
    def group(self, name: Optional[str] = None) -> GroupPort:
        raise NotImplementedError

    @abstractmethod
    def ou(self, name: Optional[str] = None) -> OrganizationalUnitPort:
        raise NotImplementedError

    @abstractmethod
    def other(self) -> EntityQueryPort:
        """Objects that are neither users nor groups nor OUs."""
        raise NotImplementedError

    @abstractmethod
    def all(self) -> EntityQueryPort:
        """Every object in the directory."""
        raise NotImplementedError

    @abstractmethod
    async def find(self, search: str, options: Optional[Options] = None) -> Any:
        """Run a free-form search filter."""
        raise NotImplementedError

    @abstractmethod
    async def unlock_user(self, name: str) -> Any:
        raise NotImplementedError
