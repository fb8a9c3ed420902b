"""Fake implementation of SlackAppApi for testing."""

import copy
import json
from dataclasses import dataclass
from typing import Any

from slack_app.api.abc import SlackAppApi
from slack_app.api.errors import RemoteAPIError, SlackAppError
from slack_app.api.types import (
    METHOD_CREATE,
    METHOD_DELETE,
    METHOD_EXPORT,
    METHOD_UPDATE,
    AppCredentials,
    ManifestCreateResponse,
    ManifestDeleteResponse,
    ManifestExportResponse,
    ManifestUpdateResponse,
)


@dataclass(frozen=True)
class ApiCall:
    """Record of one API call for test assertions.

    Attributes:
        method: The Slack method name (e.g., "apps.manifest.create")
        payload: The JSON request body that would have been sent
    """

    method: str
    payload: dict[str, str]


def _reversed_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _reversed_keys(value[key]) for key in reversed(list(value))}
    if isinstance(value, list):
        return [_reversed_keys(item) for item in value]
    return value


class FakeSlackAppApi(SlackAppApi):
    """In-memory stand-in for Slack's app manifest service.

    Apps live in a dictionary keyed by app ID. Exports return the stored
    manifest with object keys in reverse order, the way Slack re-orders
    manifests, so callers that compare strings literally see spurious drift.
    Unknown app IDs fail with `app_not_found`, like the real service.

    Example:
        >>> api = FakeSlackAppApi()
        >>> created = api.create_manifest('{"display_information": {"name": "one"}}')
        >>> api.export_manifest(created.app_id).manifest
        {'display_information': {'name': 'one'}}
        >>> assert api.calls[0].method == "apps.manifest.create"
    """

    def __init__(self, *, apps: dict[str, Any] | None = None) -> None:
        """Create the fake, optionally pre-populated with existing apps.

        Args:
            apps: Mapping of app ID to parsed manifest for apps that already
                exist remotely (e.g., apps created outside this tool)
        """
        self._apps: dict[str, Any] = dict(apps) if apps is not None else {}
        self._next_errors: dict[str, SlackAppError] = {}
        self._calls: list[ApiCall] = []
        self._created = 0

    def set_error(self, method: str, error: SlackAppError) -> None:
        """Make the next call to `method` raise `error` instead of succeeding.

        Args:
            method: The Slack method name to fail
            error: The error to raise once
        """
        self._next_errors[method] = error

    def create_manifest(self, manifest: str) -> ManifestCreateResponse:
        self._record(METHOD_CREATE, {"manifest": manifest})
        parsed = self._parse(manifest)

        self._created += 1
        app_id = f"A{self._created:09d}FAKE"
        self._apps[app_id] = parsed
        client_id = f"1000000000.{self._created:013d}"
        return ManifestCreateResponse(
            app_id=app_id,
            credentials=AppCredentials(
                client_id=client_id,
                client_secret=f"secret-{app_id.lower()}",
                verification_token=f"verification-{app_id.lower()}",
                signing_secret=f"signing-{app_id.lower()}",
            ),
            oauth_authorize_url=f"https://slack.com/oauth/v2/authorize?client_id={client_id}",
        )

    def export_manifest(self, app_id: str) -> ManifestExportResponse:
        self._record(METHOD_EXPORT, {"app_id": app_id})
        self._require_app(app_id)
        return ManifestExportResponse(manifest=_reversed_keys(copy.deepcopy(self._apps[app_id])))

    def update_manifest(self, app_id: str, manifest: str) -> ManifestUpdateResponse:
        self._record(METHOD_UPDATE, {"app_id": app_id, "manifest": manifest})
        self._require_app(app_id)
        self._apps[app_id] = self._parse(manifest)
        return ManifestUpdateResponse()

    def delete_manifest(self, app_id: str) -> ManifestDeleteResponse:
        self._record(METHOD_DELETE, {"app_id": app_id})
        self._require_app(app_id)
        del self._apps[app_id]
        return ManifestDeleteResponse()

    def _record(self, method: str, payload: dict[str, str]) -> None:
        self._calls.append(ApiCall(method=method, payload=payload))
        if method in self._next_errors:
            raise self._next_errors.pop(method)

    def _require_app(self, app_id: str) -> None:
        if app_id not in self._apps:
            raise RemoteAPIError(error="app_not_found", errors="")

    def _parse(self, manifest: str) -> Any:
        try:
            return json.loads(manifest)
        except json.JSONDecodeError as e:
            raise RemoteAPIError(
                error="invalid_manifest",
                errors=json.dumps([{"message": str(e), "pointer": "/"}], separators=(",", ":")),
            ) from e

    @property
    def apps(self) -> dict[str, Any]:
        """Read-only access to the apps that currently exist.

        Returns:
            Copy of the app ID to manifest mapping
        """
        return dict(self._apps)

    @property
    def calls(self) -> list[ApiCall]:
        """Read-only access to every call made, in order.

        Returns:
            Copy of the recorded calls
        """
        return list(self._calls)
