"""Decoding of Slack Web API responses.

Every Slack response is a JSON object that may carry the generic error
envelope `{"error": "...", "errors": <any JSON>}`. The `errors` member is
kept as the raw text Slack sent, so RemoteAPIError messages reproduce it
byte for byte instead of a re-encoded copy.
"""

import json
from json.decoder import scanstring
from typing import Any

from slack_app.api.errors import DecodeError, HTTPError, RemoteAPIError
from slack_app.api.types import (
    AppCredentials,
    ManifestCreateResponse,
    ManifestExportResponse,
)

_DECODER = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


def _skip_whitespace(text: str, idx: int) -> int:
    while idx < len(text) and text[idx] in _WHITESPACE:
        idx += 1
    return idx


def split_raw_members(text: str) -> dict[str, str]:
    """Split a JSON object into its top-level members without re-encoding them.

    Args:
        text: JSON text whose top-level value must be an object

    Returns:
        Mapping of member name to the member's raw JSON text. Later
        duplicates win, matching the behaviour of ordinary decoding.

    Raises:
        DecodeError: If the text is not a single well-formed JSON object
    """
    idx = _skip_whitespace(text, 0)
    if text[idx : idx + 1] != "{":
        raise DecodeError(f"expected a JSON object, got: {text[:80]!r}")
    idx = _skip_whitespace(text, idx + 1)

    members: dict[str, str] = {}
    if text[idx : idx + 1] == "}":
        idx += 1
    else:
        try:
            while True:
                if text[idx : idx + 1] != '"':
                    raise DecodeError(f"expected a member name at offset {idx}")
                name, idx = scanstring(text, idx + 1)
                idx = _skip_whitespace(text, idx)
                if text[idx : idx + 1] != ":":
                    raise DecodeError(f"expected ':' at offset {idx}")
                start = _skip_whitespace(text, idx + 1)
                _, end = _DECODER.raw_decode(text, start)
                members[name] = text[start:end]
                idx = _skip_whitespace(text, end)
                delimiter = text[idx : idx + 1]
                if delimiter not in (",", "}"):
                    raise DecodeError(f"expected ',' or '}}' at offset {idx}")
                idx = _skip_whitespace(text, idx + 1)
                if delimiter == "}":
                    break
        except json.JSONDecodeError as e:
            raise DecodeError(str(e)) from e

    if _skip_whitespace(text, idx) != len(text):
        raise DecodeError(f"unexpected trailing data at offset {idx}")
    return members


def decode_envelope(*, status_code: int, body: bytes) -> dict[str, Any]:
    """Check a raw Slack response and return its decoded top-level members.

    Args:
        status_code: HTTP status code of the response
        body: Complete response body

    Returns:
        The response object with each member decoded

    Raises:
        HTTPError: If the status is not exactly 200
        RemoteAPIError: If the envelope's `error` member is non-empty
        DecodeError: If the body is not a JSON object or `error` is not a string
    """
    text = body.decode("utf-8", errors="replace")
    if status_code != 200:
        raise HTTPError(status_code=status_code, body=text)

    raw_members = split_raw_members(text)
    members = {name: json.loads(raw) for name, raw in raw_members.items()}

    error = members.get("error")
    if error is not None and not isinstance(error, str):
        raise DecodeError(f"envelope 'error' must be a string, got {type(error).__name__}")
    if error:
        raise RemoteAPIError(error=error, errors=raw_members.get("errors", ""))
    return members


def _require_str(data: dict[str, Any], key: str, *, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"{context}: expected string field '{key}', got {value!r}")
    return value


def decode_create_response(members: dict[str, Any]) -> ManifestCreateResponse:
    """Decode the fields consumed from an apps.manifest.create response.

    Raises:
        DecodeError: If app_id, credentials or oauth_authorize_url are missing
            or have the wrong type
    """
    context = "apps.manifest.create"
    credentials = members.get("credentials")
    if not isinstance(credentials, dict):
        raise DecodeError(f"{context}: expected object field 'credentials', got {credentials!r}")
    return ManifestCreateResponse(
        app_id=_require_str(members, "app_id", context=context),
        credentials=AppCredentials(
            client_id=_require_str(credentials, "client_id", context=context),
            client_secret=_require_str(credentials, "client_secret", context=context),
            verification_token=_require_str(credentials, "verification_token", context=context),
            signing_secret=_require_str(credentials, "signing_secret", context=context),
        ),
        oauth_authorize_url=_require_str(members, "oauth_authorize_url", context=context),
    )


def decode_export_response(members: dict[str, Any]) -> ManifestExportResponse:
    """Decode the manifest from an apps.manifest.export response.

    Raises:
        DecodeError: If the response has no manifest member
    """
    if "manifest" not in members:
        raise DecodeError("apps.manifest.export: response has no 'manifest' field")
    return ManifestExportResponse(manifest=members["manifest"])
