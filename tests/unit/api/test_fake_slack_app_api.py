"""Tests for FakeSlackAppApi."""

import re

import pytest

from slack_app.api.errors import HTTPError, RemoteAPIError
from slack_app.api.fake import ApiCall, FakeSlackAppApi


class TestFakeSlackAppApi:
    """Tests for the in-memory Slack app manifest service."""

    def test_create_assigns_app_id_and_credentials(self) -> None:
        """create_manifest returns a Slack-shaped app ID and https authorize URL."""
        api = FakeSlackAppApi()

        result = api.create_manifest('{"display_information":{"name":"one"}}')

        assert re.match(r"^A[A-Z0-9]+$", result.app_id)
        assert result.oauth_authorize_url.startswith("https://")
        assert result.credentials.client_id in result.oauth_authorize_url
        assert api.apps == {result.app_id: {"display_information": {"name": "one"}}}

    def test_create_assigns_distinct_ids(self) -> None:
        """Each created app gets its own ID."""
        api = FakeSlackAppApi()

        first = api.create_manifest("{}")
        second = api.create_manifest("{}")

        assert first.app_id != second.app_id

    def test_create_rejects_invalid_json(self) -> None:
        """An unparseable manifest fails with invalid_manifest."""
        api = FakeSlackAppApi()

        with pytest.raises(RemoteAPIError) as exc_info:
            api.create_manifest("{not json")

        assert exc_info.value.error == "invalid_manifest"
        assert api.apps == {}

    def test_export_reorders_keys(self) -> None:
        """Exports come back with keys reversed, like a remote reformat."""
        api = FakeSlackAppApi(apps={"A1": {"a": 1, "b": {"c": 2, "d": 3}}})

        result = api.export_manifest("A1")

        assert result.manifest == {"a": 1, "b": {"c": 2, "d": 3}}
        assert list(result.manifest) == ["b", "a"]
        assert list(result.manifest["b"]) == ["d", "c"]

    def test_unknown_app_fails(self) -> None:
        """Calls against an app that does not exist fail with app_not_found."""
        api = FakeSlackAppApi()

        with pytest.raises(RemoteAPIError) as exc_info:
            api.export_manifest("A404")

        assert str(exc_info.value) == "app_not_found"

    def test_delete_then_export_fails(self) -> None:
        """A deleted app can no longer be exported."""
        api = FakeSlackAppApi(apps={"A1": {}})

        api.delete_manifest("A1")

        with pytest.raises(RemoteAPIError):
            api.export_manifest("A1")

    def test_update_replaces_manifest(self) -> None:
        """update_manifest replaces the stored manifest wholesale."""
        api = FakeSlackAppApi(apps={"A1": {"a": 1, "b": 2}})

        api.update_manifest("A1", '{"c": 3}')

        assert api.apps["A1"] == {"c": 3}

    def test_set_error_fails_next_call_only(self) -> None:
        """A configured error is raised once, then calls succeed again."""
        api = FakeSlackAppApi(apps={"A1": {}})
        api.set_error("apps.manifest.export", HTTPError(status_code=503, body="unavailable"))

        with pytest.raises(HTTPError):
            api.export_manifest("A1")

        assert api.export_manifest("A1").manifest == {}

    def test_records_calls(self) -> None:
        """Every call is recorded with its request payload."""
        api = FakeSlackAppApi(apps={"A1": {}})

        api.update_manifest("A1", "{}")
        api.delete_manifest("A1")

        assert api.calls == [
            ApiCall(method="apps.manifest.update", payload={"app_id": "A1", "manifest": "{}"}),
            ApiCall(method="apps.manifest.delete", payload={"app_id": "A1"}),
        ]
