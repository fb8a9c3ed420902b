"""Typed responses for the Slack `apps.manifest.*` methods.

Each API method decodes into its own frozen dataclass, so callers never
receive an untyped dict.
"""

from dataclasses import dataclass
from typing import Any

METHOD_CREATE = "apps.manifest.create"
METHOD_EXPORT = "apps.manifest.export"
METHOD_UPDATE = "apps.manifest.update"
METHOD_DELETE = "apps.manifest.delete"


@dataclass(frozen=True)
class AppCredentials:
    """Credentials Slack issues once, in the apps.manifest.create response.

    Attributes:
        client_id: Public OAuth client ID
        client_secret: OAuth client secret
        verification_token: Legacy request verification token
        signing_secret: Secret used to verify request signatures
    """

    client_id: str
    client_secret: str
    verification_token: str
    signing_secret: str


@dataclass(frozen=True)
class ManifestCreateResponse:
    """Fields consumed from apps.manifest.create."""

    app_id: str
    credentials: AppCredentials
    oauth_authorize_url: str


@dataclass(frozen=True)
class ManifestExportResponse:
    """Fields consumed from apps.manifest.export.

    Attributes:
        manifest: The exported manifest as parsed JSON. Key order and
            formatting are whatever Slack chose.
    """

    manifest: Any


@dataclass(frozen=True)
class ManifestUpdateResponse:
    """Success result from apps.manifest.update. No fields are consumed."""


@dataclass(frozen=True)
class ManifestDeleteResponse:
    """Success result from apps.manifest.delete. No fields are consumed."""
