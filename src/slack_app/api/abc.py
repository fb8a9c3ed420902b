"""Abstract interface for the Slack App manifest API."""

from abc import ABC, abstractmethod

from slack_app.api.types import (
    ManifestCreateResponse,
    ManifestDeleteResponse,
    ManifestExportResponse,
    ManifestUpdateResponse,
)


class SlackAppApi(ABC):
    """Abstract interface for the Slack `apps.manifest.*` methods.

    All implementations (real and fake) must implement this interface.
    Each method performs exactly one round trip and either returns the
    method's typed response or raises a SlackAppError subclass. Nothing is
    retried.

    Implementations hold no per-call state, so one instance is shared by
    every resource operation in a session.
    """

    @abstractmethod
    def create_manifest(self, manifest: str) -> ManifestCreateResponse:
        """Create a new app from a manifest.

        Args:
            manifest: The app manifest as a JSON string

        Returns:
            The new app's ID, its credentials and its OAuth authorize URL.
            These credentials are never returned again.

        Raises:
            SlackAppError: If the call fails for any reason
        """
        ...

    @abstractmethod
    def export_manifest(self, app_id: str) -> ManifestExportResponse:
        """Export the current manifest of an existing app.

        Args:
            app_id: The app's ID (e.g., "A01234ABCDE")

        Returns:
            The manifest as parsed JSON

        Raises:
            SlackAppError: If the call fails for any reason
        """
        ...

    @abstractmethod
    def update_manifest(self, app_id: str, manifest: str) -> ManifestUpdateResponse:
        """Replace an app's manifest wholesale.

        Args:
            app_id: The app's ID
            manifest: The new manifest as a JSON string

        Raises:
            SlackAppError: If the call fails for any reason
        """
        ...

    @abstractmethod
    def delete_manifest(self, app_id: str) -> ManifestDeleteResponse:
        """Permanently delete an app.

        Args:
            app_id: The app's ID

        Raises:
            SlackAppError: If the call fails for any reason
        """
        ...
