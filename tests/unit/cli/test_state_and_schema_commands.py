"""Tests for `slack-app state list` and `slack-app schema`."""

from click.testing import CliRunner

from slack_app.cli.cli import cli
from slack_app.context import SlackAppContext
from slack_app.resources.types import ManifestRecord, TokenRecord
from slack_app.state.fake import FakeStateStore


class TestStateList:
    """Tests for `state list`."""

    def test_empty_state(self) -> None:
        """An empty store prints a notice."""
        ctx = SlackAppContext.for_test()

        result = CliRunner().invoke(cli, ["state", "list"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "No resources tracked." in result.output

    def test_lists_manifests_and_tokens(self) -> None:
        """Every tracked record appears with its kind and ID."""
        state = FakeStateStore(
            manifests={
                "bot": ManifestRecord(
                    id="A1", manifest=None, credentials=None, oauth_authorize_url=None
                )
            },
            tokens={"cfg": TokenRecord(id=None, token=None, refresh_token="r")},
        )
        ctx = SlackAppContext.for_test(state=state)

        result = CliRunner().invoke(cli, ["state", "list"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "bot" in result.output
        assert "A1" in result.output
        assert "cfg" in result.output
        assert "unknown" in result.output
        assert result.output.index("bot") < result.output.index("cfg")


class TestSchema:
    """Tests for `schema`."""

    def test_describes_all_kinds(self) -> None:
        """Without KIND, both resource kinds are described."""
        result = CliRunner().invoke(cli, ["schema"], obj=SlackAppContext.for_test())

        assert result.exit_code == 0, result.output
        assert "Slack App Manifest resource" in result.output
        assert "Slack App Token resource" in result.output

    def test_describes_one_kind(self) -> None:
        """KIND limits output to that kind."""
        result = CliRunner().invoke(cli, ["schema", "token"], obj=SlackAppContext.for_test())

        assert result.exit_code == 0, result.output
        assert "Slack App Token resource" in result.output
        assert "Slack App Manifest resource" not in result.output

    def test_rejects_unknown_kind(self) -> None:
        """Unknown kinds are a usage error."""
        result = CliRunner().invoke(cli, ["schema", "widget"], obj=SlackAppContext.for_test())

        assert result.exit_code == 2
