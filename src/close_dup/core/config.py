"""Configuration loading.

Settings come from an optional TOML file with environment variable overrides:

    # ~/.config/close-dup/config.toml
    actor = "@octocat"
    assume_yes = false

Environment variables:
    CLOSE_DUP_CONFIG      Path to the config file
    CLOSE_DUP_ACTOR       Identity named in comments when no duplicate is given
    CLOSE_DUP_ASSUME_YES  Continue without prompting when the issue is already closed
    CLOSE_DUP_DEBUG       Enable debug logging
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "CLOSE_DUP_CONFIG"
ACTOR_ENV_VAR = "CLOSE_DUP_ACTOR"
ASSUME_YES_ENV_VAR = "CLOSE_DUP_ASSUME_YES"
DEBUG_ENV_VAR = "CLOSE_DUP_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CloseDupConfig:
    """Immutable configuration loaded once at the CLI entry point.

    Attributes:
        actor: Identity named in "Closed as duplicate by ..." comments.
            None means derive it from the authenticated gh user.
        assume_yes: Skip the already-closed confirmation and continue.
    """

    actor: str | None
    assume_yes: bool

    @staticmethod
    def default() -> "CloseDupConfig":
        return CloseDupConfig(actor=None, assume_yes=False)


def default_config_path(env: Mapping[str, str]) -> Path:
    override = env.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "close-dup" / "config.toml"


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def load_config(env: Mapping[str, str], path: Path | None = None) -> CloseDupConfig:
    """Load configuration from the TOML file and apply environment overrides.

    Args:
        env: Environment mapping (usually os.environ)
        path: Config file path (default: resolved from env)

    Returns:
        CloseDupConfig; defaults are used when the file does not exist

    Raises:
        ValueError: If the file is unreadable, not valid TOML, or a field has the wrong type
    """
    config_path = path if path is not None else default_config_path(env)

    actor: str | None = None
    assume_yes = False

    if config_path.exists():
        if not config_path.is_file():
            raise ValueError(f"Config path {config_path} is not a file")
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Cannot read {config_path}: {e}") from e
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        raw_actor = data.get("actor")
        if raw_actor is not None:
            if not isinstance(raw_actor, str):
                raise ValueError(f"'actor' must be a string in {config_path}")
            actor = raw_actor.strip() or None

        raw_assume_yes = data.get("assume_yes", False)
        if not isinstance(raw_assume_yes, bool):
            raise ValueError(f"'assume_yes' must be true or false in {config_path}")
        assume_yes = raw_assume_yes

    env_actor = env.get(ACTOR_ENV_VAR)
    if env_actor and env_actor.strip():
        actor = env_actor.strip()

    if ASSUME_YES_ENV_VAR in env:
        assume_yes = is_truthy(env[ASSUME_YES_ENV_VAR])

    return CloseDupConfig(actor=actor, assume_yes=assume_yes)
