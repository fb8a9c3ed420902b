"""Tests for the `slack-app token` commands."""

import json

from click.testing import CliRunner

from slack_app.api.fake import FakeSlackAppApi
from slack_app.cli.cli import cli
from slack_app.context import SlackAppContext
from slack_app.resources.schema import REDACTED
from slack_app.resources.types import TokenRecord
from slack_app.state.fake import FakeStateStore


class TestTokenCreate:
    """Tests for `token create`."""

    def test_always_fails(self) -> None:
        """Tokens cannot be created; nothing is stored or sent."""
        api = FakeSlackAppApi()
        state = FakeStateStore()
        ctx = SlackAppContext.for_test(api=api, state=state)

        result = CliRunner().invoke(cli, ["token", "create", "cfg"], obj=ctx)

        assert result.exit_code == 1
        assert "Tokens cannot be created, only imported." in result.output
        assert state.tokens == {}
        assert api.calls == []


class TestTokenImport:
    """Tests for `token import`."""

    def test_stores_refresh_token_only(self) -> None:
        """import tracks the refresh token; id and token stay unknown."""
        state = FakeStateStore()
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["token", "import", "cfg", "xoxe-1-abc"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert state.get_token("cfg") == TokenRecord(
            id=None, token=None, refresh_token="xoxe-1-abc"
        )
        assert "Imported token 'cfg'" in result.output

    def test_refuses_existing_name(self) -> None:
        """import does not overwrite a tracked token."""
        existing = TokenRecord(id=None, token=None, refresh_token="old")
        state = FakeStateStore(tokens={"cfg": existing})
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["token", "import", "cfg", "new"], obj=ctx)

        assert result.exit_code == 1
        assert "already tracked" in result.output
        assert state.get_token("cfg") == existing


class TestTokenRead:
    """Tests for `token read`."""

    def test_passes_record_through(self) -> None:
        """read leaves the stored record unchanged."""
        record = TokenRecord(id=None, token=None, refresh_token="r")
        state = FakeStateStore(tokens={"cfg": record})
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["token", "read", "cfg"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert state.get_token("cfg") == record
        assert "'cfg' is up to date" in result.output

    def test_unknown_name(self) -> None:
        """Reading an untracked token fails."""
        ctx = SlackAppContext.for_test()

        result = CliRunner().invoke(cli, ["token", "read", "missing"], obj=ctx)

        assert result.exit_code == 1
        assert "No token named 'missing' in state" in result.output


class TestTokenDelete:
    """Tests for `token delete`."""

    def test_removes_from_state_without_api_calls(self) -> None:
        """delete only forgets the token locally."""
        api = FakeSlackAppApi()
        state = FakeStateStore(tokens={"cfg": TokenRecord(id=None, token=None, refresh_token="r")})
        ctx = SlackAppContext.for_test(api=api, state=state)

        result = CliRunner().invoke(cli, ["token", "delete", "cfg"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert state.tokens == {}
        assert api.calls == []


class TestTokenShow:
    """Tests for `token show`."""

    def test_redacts_by_default(self) -> None:
        """Sensitive fields are redacted; unknown values stay null."""
        state = FakeStateStore(tokens={"cfg": TokenRecord(id=None, token=None, refresh_token="r")})
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["token", "show", "cfg"], obj=ctx)

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["refresh_token"] == REDACTED
        assert data["token"] is None
        assert data["id"] is None

    def test_show_sensitive(self) -> None:
        """--show-sensitive prints the refresh token."""
        state = FakeStateStore(tokens={"cfg": TokenRecord(id=None, token=None, refresh_token="r")})
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["token", "show", "cfg", "--show-sensitive"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["refresh_token"] == "r"


class TestTokenUpdate:
    """Tests for `token update`."""

    def test_passes_record_through(self) -> None:
        """update leaves the stored record unchanged and calls nothing remote."""
        api = FakeSlackAppApi()
        record = TokenRecord(id=None, token=None, refresh_token="r")
        state = FakeStateStore(tokens={"cfg": record})
        ctx = SlackAppContext.for_test(api=api, state=state)

        result = CliRunner().invoke(cli, ["token", "update", "cfg"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert state.get_token("cfg") == record
        assert api.calls == []

    def test_unknown_name(self) -> None:
        """Updating an untracked token fails."""
        ctx = SlackAppContext.for_test()

        result = CliRunner().invoke(cli, ["token", "update", "missing"], obj=ctx)

        assert result.exit_code == 1
        assert "No token named 'missing' in state" in result.output
