"""Abstract interface for resource state persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from slack_app.resources.types import ManifestRecord, TokenRecord


@dataclass(frozen=True)
class StateEntry:
    """One tracked resource, as listed by list_entries().

    Attributes:
        kind: Resource kind ("manifest" or "token")
        name: User-chosen name addressing the resource
        record: The persisted record
    """

    kind: str
    name: str
    record: ManifestRecord | TokenRecord


class StateStore(ABC):
    """Abstract interface for resource state persistence.

    Records are addressed by (kind, name). Writes replace the whole record;
    a failed lifecycle operation simply never calls put or remove, which
    leaves the prior record in place.
    """

    @abstractmethod
    def get_manifest(self, name: str) -> ManifestRecord | None:
        """Get a manifest record by name.

        Returns:
            ManifestRecord if found, None otherwise
        """
        ...

    @abstractmethod
    def put_manifest(self, name: str, record: ManifestRecord) -> None:
        """Insert or replace a manifest record."""
        ...

    @abstractmethod
    def remove_manifest(self, name: str) -> None:
        """Remove a manifest record. Removing a missing record is a no-op."""
        ...

    @abstractmethod
    def get_token(self, name: str) -> TokenRecord | None:
        """Get a token record by name.

        Returns:
            TokenRecord if found, None otherwise
        """
        ...

    @abstractmethod
    def put_token(self, name: str, record: TokenRecord) -> None:
        """Insert or replace a token record."""
        ...

    @abstractmethod
    def remove_token(self, name: str) -> None:
        """Remove a token record. Removing a missing record is a no-op."""
        ...

    @abstractmethod
    def list_entries(self) -> list[StateEntry]:
        """List every tracked resource, ordered by kind then name."""
        ...
