"""Fake implementation of StateStore for testing."""

from slack_app.resources.types import MANIFEST_KIND, TOKEN_KIND, ManifestRecord, TokenRecord
from slack_app.state.abc import StateEntry, StateStore


class FakeStateStore(StateStore):
    """In-memory implementation of StateStore for testing.

    Stores records in dictionaries keyed by name, one per kind.

    Example:
        >>> store = FakeStateStore()
        >>> store.put_manifest("app", record)
        >>> assert store.get_manifest("app") == record
    """

    def __init__(
        self,
        *,
        manifests: dict[str, ManifestRecord] | None = None,
        tokens: dict[str, TokenRecord] | None = None,
    ) -> None:
        self._manifests: dict[str, ManifestRecord] = dict(manifests) if manifests else {}
        self._tokens: dict[str, TokenRecord] = dict(tokens) if tokens else {}

    def get_manifest(self, name: str) -> ManifestRecord | None:
        return self._manifests.get(name)

    def put_manifest(self, name: str, record: ManifestRecord) -> None:
        self._manifests[name] = record

    def remove_manifest(self, name: str) -> None:
        self._manifests.pop(name, None)

    def get_token(self, name: str) -> TokenRecord | None:
        return self._tokens.get(name)

    def put_token(self, name: str, record: TokenRecord) -> None:
        self._tokens[name] = record

    def remove_token(self, name: str) -> None:
        self._tokens.pop(name, None)

    def list_entries(self) -> list[StateEntry]:
        entries = [
            StateEntry(kind=MANIFEST_KIND, name=name, record=record)
            for name, record in sorted(self._manifests.items())
        ]
        entries.extend(
            StateEntry(kind=TOKEN_KIND, name=name, record=record)
            for name, record in sorted(self._tokens.items())
        )
        return entries

    @property
    def manifests(self) -> dict[str, ManifestRecord]:
        """Read-only access to stored manifest records.

        Returns:
            Copy of the manifests dictionary
        """
        return dict(self._manifests)

    @property
    def tokens(self) -> dict[str, TokenRecord]:
        """Read-only access to stored token records.

        Returns:
            Copy of the tokens dictionary
        """
        return dict(self._tokens)
