"""Tests for session bootstrap."""

from pathlib import Path

from slack_app.api.fake import FakeSlackAppApi
from slack_app.api.real import RealSlackAppApi
from slack_app.config import ProviderConfig
from slack_app.context import SlackAppContext, create_context, resolve_token
from slack_app.state.sqlite import SQLiteStateStore


class TestResolveToken:
    """Tests for resolve_token priority."""

    def test_explicit_token_wins(self) -> None:
        """The configured token takes precedence over the environment."""
        assert resolve_token("configured", {"SLACK_APP_TOKEN": "from-env"}) == "configured"

    def test_falls_back_to_environment(self) -> None:
        """An unset token reads SLACK_APP_TOKEN."""
        assert resolve_token(None, {"SLACK_APP_TOKEN": "from-env"}) == "from-env"

    def test_explicit_empty_token_is_not_replaced(self) -> None:
        """Only None triggers the fallback."""
        assert resolve_token("", {"SLACK_APP_TOKEN": "from-env"}) == ""

    def test_missing_everywhere_yields_empty_token(self) -> None:
        """No token at all is passed through as empty instead of failing."""
        assert resolve_token(None, {}) == ""


class TestCreateContext:
    """Tests for create_context."""

    def test_resource_managers_share_one_api(self, tmp_path: Path) -> None:
        """Exactly one real API gateway is built and injected everywhere."""
        config = ProviderConfig(
            token="xoxe.xoxp-1-abc",
            api_url="https://slack.com/api",
            timeout_seconds=10.0,
            state_path=tmp_path / "state.db",
        )

        ctx = create_context(config)

        assert isinstance(ctx.api, RealSlackAppApi)
        assert isinstance(ctx.state, SQLiteStateStore)
        assert ctx.manifests._api is ctx.api
        assert ctx.tokens._api is ctx.api
        assert (tmp_path / "state.db").exists()


def test_for_test_uses_given_fakes() -> None:
    """for_test wires the provided fake API into the resource managers."""
    api = FakeSlackAppApi()

    ctx = SlackAppContext.for_test(api=api)

    assert ctx.api is api
    assert ctx.manifests._api is api
