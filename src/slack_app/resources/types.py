"""Persisted resource records.

Records are immutable. Every lifecycle operation returns a new record (or a
NonIdealState) and never mutates the one it was given, so a failed
operation leaves prior state untouched.
"""

from dataclasses import dataclass
from typing import Any

from slack_app.api.types import AppCredentials

MANIFEST_KIND = "manifest"
TOKEN_KIND = "token"

# Same shape as the create response; re-exported under the resource name.
Credentials = AppCredentials


@dataclass(frozen=True)
class ManifestRecord:
    """Persisted state for one Slack app manifest.

    Attributes:
        id: Slack-assigned app ID, stable for the app's lifetime
        manifest: The manifest JSON string, or None right after import and
            before the first read
        credentials: Credentials from create; None when the record came
            from an import, since Slack never returns them again
        oauth_authorize_url: Authorize URL from create; None for imports
    """

    id: str
    manifest: str | None
    credentials: Credentials | None
    oauth_authorize_url: str | None

    def to_dict(self) -> dict[str, Any]:
        credentials = None
        if self.credentials is not None:
            credentials = {
                "client_id": self.credentials.client_id,
                "client_secret": self.credentials.client_secret,
                "verification_token": self.credentials.verification_token,
                "signing_secret": self.credentials.signing_secret,
            }
        return {
            "id": self.id,
            "manifest": self.manifest,
            "credentials": credentials,
            "oauth_authorize_url": self.oauth_authorize_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ManifestRecord":
        raw_credentials = data.get("credentials")
        credentials = None
        if raw_credentials is not None:
            credentials = Credentials(
                client_id=raw_credentials["client_id"],
                client_secret=raw_credentials["client_secret"],
                verification_token=raw_credentials["verification_token"],
                signing_secret=raw_credentials["signing_secret"],
            )
        return cls(
            id=data["id"],
            manifest=data.get("manifest"),
            credentials=credentials,
            oauth_authorize_url=data.get("oauth_authorize_url"),
        )


@dataclass(frozen=True)
class TokenRecord:
    """Persisted state for an imported app configuration token pair.

    Attributes:
        id: Token ID, unknown (None) after import
        token: Current access token, unknown (None) after import
        refresh_token: Refresh token supplied at import
    """

    id: str | None
    token: str | None
    refresh_token: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "token": self.token, "refresh_token": self.refresh_token}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TokenRecord":
        return cls(
            id=data.get("id"),
            token=data.get("token"),
            refresh_token=data.get("refresh_token"),
        )


@dataclass(frozen=True)
class ResourceRemoved:
    """Success result from a delete: the record must be dropped from state."""

    kind: str
    id: str | None
