"""Attribute metadata for the `manifest` and `token` resource kinds.

Describes which attributes are inputs, which are computed by Slack, and
which hold secrets. Output code uses the sensitive flags to redact values.
"""

from dataclasses import dataclass
from typing import Any

from slack_app.resources.types import MANIFEST_KIND, TOKEN_KIND

REDACTED = "(sensitive value)"


@dataclass(frozen=True)
class AttributeSchema:
    """One attribute of a resource kind.

    Attributes:
        name: Attribute name as stored in state
        description: Markdown description shown to users
        required: True for user-supplied inputs
        computed: True for values filled in from Slack or import
        sensitive: True when the value must be redacted in output
        deprecation: Deprecation notice, or None
        attributes: Nested attributes for object-valued attributes
    """

    name: str
    description: str
    required: bool
    computed: bool
    sensitive: bool
    deprecation: str | None
    attributes: tuple["AttributeSchema", ...]


@dataclass(frozen=True)
class ResourceSchema:
    """Attribute metadata for one resource kind."""

    kind: str
    description: str
    attributes: tuple[AttributeSchema, ...]


def _attr(
    name: str,
    description: str,
    *,
    required: bool = False,
    sensitive: bool = False,
    deprecation: str | None = None,
    attributes: tuple[AttributeSchema, ...] = (),
) -> AttributeSchema:
    return AttributeSchema(
        name=name,
        description=description,
        required=required,
        computed=not required,
        sensitive=sensitive,
        deprecation=deprecation,
        attributes=attributes,
    )


MANIFEST_SCHEMA = ResourceSchema(
    kind=MANIFEST_KIND,
    description="Slack App Manifest resource",
    attributes=(
        _attr("id", "The ID of the app."),
        _attr("manifest", "A JSON app manifest encoded as a string.", required=True),
        _attr(
            "credentials",
            "Credentials Slack returns when the app is created. Null for imported apps.",
            attributes=(
                _attr(
                    "client_id",
                    "Send with `client_secret` when making your oauth.v2.access request.",
                ),
                _attr(
                    "client_secret",
                    "Send with `client_id` when making your oauth.v2.access request.",
                    sensitive=True,
                ),
                _attr(
                    "verification_token",
                    "Used to verify that requests come from Slack.",
                    sensitive=True,
                    deprecation=(
                        "We strongly recommend using the, more secure, `signing_secret` instead."
                    ),
                ),
                _attr(
                    "signing_secret",
                    "Slack signs the requests we send you using this secret. Confirm that "
                    "each request comes from Slack by verifying its unique signature.",
                    sensitive=True,
                ),
            ),
        ),
        _attr("oauth_authorize_url", "Full URL for authorization."),
    ),
)

TOKEN_SCHEMA = ResourceSchema(
    kind=TOKEN_KIND,
    description="Slack App Token resource",
    attributes=(
        _attr("id", "The ID of the token."),
        _attr("token", "Current API token.", sensitive=True),
        _attr("refresh_token", "Current refresh token.", sensitive=True),
    ),
)

SCHEMAS: dict[str, ResourceSchema] = {
    MANIFEST_KIND: MANIFEST_SCHEMA,
    TOKEN_KIND: TOKEN_SCHEMA,
}


def _redact_with(attributes: tuple[AttributeSchema, ...], data: dict[str, Any]) -> dict[str, Any]:
    by_name = {attribute.name: attribute for attribute in attributes}
    redacted: dict[str, Any] = {}
    for key, value in data.items():
        attribute = by_name.get(key)
        if attribute is None or value is None:
            redacted[key] = value
        elif attribute.sensitive:
            redacted[key] = REDACTED
        elif attribute.attributes and isinstance(value, dict):
            redacted[key] = _redact_with(attribute.attributes, value)
        else:
            redacted[key] = value
    return redacted


def redact(schema: ResourceSchema, data: dict[str, Any]) -> dict[str, Any]:
    """Replace sensitive attribute values with a placeholder.

    Null values stay null so an unknown secret is distinguishable from a
    hidden one.

    Args:
        schema: The resource kind's schema
        data: A record as produced by `to_dict()`

    Returns:
        A copy of `data` with sensitive values replaced by REDACTED
    """
    return _redact_with(schema.attributes, data)
