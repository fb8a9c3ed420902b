"""Structural comparison of manifest JSON.

Slack re-orders keys and re-formats whitespace on export, so two manifests
are the same when their parsed JSON is equal, not when their strings are.
"""

import json
from typing import Any


def canonical_manifest(manifest: Any) -> str:
    """Serialize parsed manifest JSON with sorted keys and compact separators."""
    return json.dumps(manifest, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def parse_manifest(manifest: str) -> Any | None:
    """Parse a manifest string, returning None when it is not valid JSON."""
    try:
        return json.loads(manifest)
    except json.JSONDecodeError:
        return None


def manifests_equal(left: str | None, right: str | None) -> bool:
    """Compare two manifest strings by their parsed JSON.

    Falls back to literal comparison when either side is not valid JSON,
    and treats None as equal only to None.

    Examples:
        >>> manifests_equal('{"a": 1, "b": 2}', '{"b":2,"a":1}')
        True
        >>> manifests_equal('{"a": 1}', '{"a": 2}')
        False
    """
    if left is None or right is None:
        return left is None and right is None
    parsed_left = parse_manifest(left)
    parsed_right = parse_manifest(right)
    if parsed_left is None or parsed_right is None:
        return left == right
    # Compare canonical forms; plain == would treat true and 1 as equal.
    return canonical_manifest(parsed_left) == canonical_manifest(parsed_right)
