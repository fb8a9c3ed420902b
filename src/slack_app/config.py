import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(".slack-app") / "config.toml"
DEFAULT_API_URL = "https://slack.com/api"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_STATE_PATH = Path(".slack-app") / "state.db"


@dataclass(frozen=True)
class ProviderConfig:
    """In-memory representation of the `[provider]` table of config.toml.

    Example config.toml:
      [provider]
      # Optional: falls back to the SLACK_APP_TOKEN environment variable
      token = "xoxe.xoxp-1-..."
      api_url = "https://slack.com/api"
      timeout_seconds = 30
      state_path = ".slack-app/state.db"
    """

    token: str | None  # None = read SLACK_APP_TOKEN at bootstrap
    api_url: str
    timeout_seconds: float
    state_path: Path


def default_config(cwd: Path) -> ProviderConfig:
    return ProviderConfig(
        token=None,
        api_url=DEFAULT_API_URL,
        timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
        state_path=cwd / DEFAULT_STATE_PATH,
    )


def load_config(config_path: Path, *, cwd: Path) -> ProviderConfig:
    """Load config.toml if present; otherwise return defaults.

    Args:
        config_path: Path to the TOML config file
        cwd: Directory that a relative state_path is resolved against

    Returns:
        ProviderConfig with parsed values, defaults for anything unset

    Raises:
        ValueError: If a setting has the wrong type
    """
    if not config_path.exists():
        return default_config(cwd)

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    provider = data.get("provider", {})

    token = provider.get("token")
    if token is not None and not isinstance(token, str):
        raise ValueError(f"{config_path}: provider.token must be a string")

    api_url = str(provider.get("api_url", DEFAULT_API_URL))

    timeout = provider.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float) or timeout <= 0:
        raise ValueError(f"{config_path}: provider.timeout_seconds must be a positive number")

    state_path = Path(str(provider.get("state_path", DEFAULT_STATE_PATH)))
    if not state_path.is_absolute():
        state_path = cwd / state_path

    return ProviderConfig(
        token=token,
        api_url=api_url,
        timeout_seconds=float(timeout),
        state_path=state_path,
    )
