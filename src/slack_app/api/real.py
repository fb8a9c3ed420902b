"""Real implementation of SlackAppApi over HTTPS using urllib."""

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from slack_app.api.abc import SlackAppApi
from slack_app.api.envelope import (
    decode_create_response,
    decode_envelope,
    decode_export_response,
)
from slack_app.api.errors import TransportError
from slack_app.api.types import (
    METHOD_CREATE,
    METHOD_DELETE,
    METHOD_EXPORT,
    METHOD_UPDATE,
    ManifestCreateResponse,
    ManifestDeleteResponse,
    ManifestExportResponse,
    ManifestUpdateResponse,
)

logger = logging.getLogger(__name__)


class RealSlackAppApi(SlackAppApi):
    """Production implementation that POSTs JSON to the Slack Web API.

    Attributes:
        token: App configuration token sent as a bearer credential
        base_url: API root; the method name is appended after a slash
        timeout_seconds: Upper bound on one round trip, including reading the body
    """

    def __init__(self, *, token: str, base_url: str, timeout_seconds: float) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    def create_manifest(self, manifest: str) -> ManifestCreateResponse:
        members = self._request(METHOD_CREATE, {"manifest": manifest})
        return decode_create_response(members)

    def export_manifest(self, app_id: str) -> ManifestExportResponse:
        members = self._request(METHOD_EXPORT, {"app_id": app_id})
        return decode_export_response(members)

    def update_manifest(self, app_id: str, manifest: str) -> ManifestUpdateResponse:
        self._request(METHOD_UPDATE, {"app_id": app_id, "manifest": manifest})
        return ManifestUpdateResponse()

    def delete_manifest(self, app_id: str) -> ManifestDeleteResponse:
        self._request(METHOD_DELETE, {"app_id": app_id})
        return ManifestDeleteResponse()

    def _request(self, method: str, payload: dict[str, str]) -> dict[str, Any]:
        """POST one API method and return the decoded response members.

        Raises:
            TransportError: If the connection fails, times out, or the body
                cannot be read
            HTTPError: If the status is not 200
            RemoteAPIError: If Slack reports an error in the envelope
            DecodeError: If the body is not a JSON object
        """
        request = urllib.request.Request(
            f"{self._base_url}/{method}",
            data=json.dumps(payload).encode("utf-8"),
            method="POST",
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self._token}",
            },
        )
        logger.debug("POST %s", method)

        try:
            with urllib.request.urlopen(request, timeout=self._timeout_seconds) as response:
                status_code = response.status
                body = response.read()
        except urllib.error.HTTPError as e:
            # urllib raises for non-2xx; the body is still the error payload
            status_code = e.code
            try:
                body = e.read() if e.fp is not None else b""
            except (http.client.HTTPException, OSError) as read_error:
                raise TransportError(f"{method}: {read_error}") from read_error
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise TransportError(f"{method}: {e}") from e

        logger.debug("%s returned status %d (%d bytes)", method, status_code, len(body))
        return decode_envelope(status_code=status_code, body=body)
