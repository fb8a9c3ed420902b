"""Session bootstrap: one API gateway shared by every resource manager."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from slack_app.api.abc import SlackAppApi
from slack_app.api.fake import FakeSlackAppApi
from slack_app.api.real import RealSlackAppApi
from slack_app.config import ProviderConfig
from slack_app.resources.manifest import ManifestResource
from slack_app.resources.token import TokenResource
from slack_app.state.abc import StateStore
from slack_app.state.fake import FakeStateStore
from slack_app.state.sqlite import SQLiteStateStore

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "SLACK_APP_TOKEN"


@dataclass(frozen=True)
class SlackAppContext:
    """Immutable context holding all dependencies for one session.

    Created at the CLI entry point and threaded through commands via Click's
    context object. The single `api` instance is the one both resource
    managers were built with.
    """

    api: SlackAppApi
    state: StateStore
    manifests: ManifestResource
    tokens: TokenResource

    @staticmethod
    def for_test(
        *,
        api: SlackAppApi | None = None,
        state: StateStore | None = None,
    ) -> "SlackAppContext":
        """Create a context backed by fakes.

        Args:
            api: API gateway to use (defaults to an empty FakeSlackAppApi)
            state: State store to use (defaults to an empty FakeStateStore)
        """
        resolved_api = api if api is not None else FakeSlackAppApi()
        resolved_state = state if state is not None else FakeStateStore()
        return _build_context(resolved_api, resolved_state)


def resolve_token(config_token: str | None, environ: Mapping[str, str]) -> str:
    """Resolve the bearer token for the session.

    Priority order:
    1. The explicit `token` setting, even when it is an empty string
    2. The SLACK_APP_TOKEN environment variable

    An empty result is returned as-is; the first API call then fails with
    Slack's own authentication error.

    Args:
        config_token: The `token` setting, None when unset
        environ: Environment to read the fallback from

    Returns:
        The token to send, possibly empty
    """
    if config_token is not None:
        return config_token
    return environ.get(TOKEN_ENV_VAR, "")


def _build_context(api: SlackAppApi, state: StateStore) -> SlackAppContext:
    return SlackAppContext(
        api=api,
        state=state,
        manifests=ManifestResource(api),
        tokens=TokenResource(api),
    )


def create_context(config: ProviderConfig) -> SlackAppContext:
    """Create the production context with real implementations.

    Args:
        config: Loaded provider configuration

    Returns:
        SlackAppContext whose resource managers share one RealSlackAppApi
    """
    token = resolve_token(config.token, os.environ)
    if not token:
        logger.debug("no token configured and %s is unset", TOKEN_ENV_VAR)

    api = RealSlackAppApi(
        token=token,
        base_url=config.api_url,
        timeout_seconds=config.timeout_seconds,
    )
    state = SQLiteStateStore(db_path=config.state_path)
    return _build_context(api, state)
