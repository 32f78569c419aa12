"""Configuration loading from YAML and environment.

Action inputs come from the environment GitHub Actions provides
(INPUT_GITHUB-TOKEN, INPUT_GIT-USER.NAME, INPUT_GIT-USER.EMAIL). The token
can also be taken from GITHUB_TOKEN or a file named by GITHUB_TOKEN_FILE
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from format_please.services.comment_parser import DEFAULT_TRIGGER_PHRASE
from format_please.services.file_selector import DEFAULT_EXTENSION
from format_please.services.format_runner import DEFAULT_PARSER


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


# Injected by load_config so secret lookup can read env/file
_current_env: dict[str, str] = {}


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


class InputsConfig(BaseSettings):
    """Action inputs: API token and commit identity."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_GITHUB-TOKEN", "github_token", "github-token"),
        description="Token for the GitHub API",
    )
    git_user_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_GIT-USER.NAME", "git_user_name", "git-user.name"),
        description="user.name for the formatting commit",
    )
    git_user_email: str | None = Field(
        default=None,
        validation_alias=AliasChoices("INPUT_GIT-USER.EMAIL", "git_user_email", "git-user.email"),
        description="user.email for the formatting commit",
    )


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    api_url: str = Field(default="https://api.github.com", description="API base URL")


class RunnerConfig(BaseSettings):
    """Runtime context provided by the GitHub Actions runner."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    event_name: str | None = Field(default=None, description="Triggering event name")
    event_path: str | None = Field(default=None, description="Path to the event payload JSON")
    repository: str | None = Field(default=None, description="owner/repo fallback")
    workspace: str = Field(default=".", description="Checked-out repository directory")


class FormatterConfig(BaseSettings):
    """Trigger phrase, file filter and messages."""

    model_config = SettingsConfigDict(env_prefix="FORMATTER_", extra="ignore")

    trigger_phrase: str = Field(default=DEFAULT_TRIGGER_PHRASE, min_length=1, description="Comment prefix")
    extension: str = Field(default=DEFAULT_EXTENSION, min_length=1, description="File suffix to format")
    parser: str = Field(default=DEFAULT_PARSER, description="Formatter key")
    reaction: str = Field(default="eyes", description="Reaction used to acknowledge the comment")
    commit_message: str = Field(default="Format markdown files with Prettier", description="Commit message")
    no_changes_message: str = Field(
        default="Prettier ran, but didn't make any changes to the files you added/modified.",
        description="Comment posted when formatting changed nothing",
    )


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    inputs: InputsConfig = Field(default_factory=InputsConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    formatter: FormatterConfig = Field(default_factory=FormatterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from input, env or Docker secret file."""
        t = self.inputs.github_token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def require_inputs(self) -> tuple[str, str, str]:
        """Return (token, git user name, git user email); raise ConfigError if any is missing."""
        token = self.github_token_resolved
        missing = []
        if not token:
            missing.append("github-token")
        if not self.inputs.git_user_name:
            missing.append("git-user.name")
        if not self.inputs.git_user_email:
            missing.append("git-user.email")
        if missing:
            raise ConfigError(f"Input required and not supplied: {', '.join(missing)}")
        return token, self.inputs.git_user_name, self.inputs.git_user_email


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file (optional) and environment.

    YAML sections: inputs, github, runner, formatter, logging. Values set in
    YAML take precedence over environment variables.
    """
    global _current_env

    _current_env = dict(os.environ)

    raw: dict[str, Any] = {}
    path = config_path or Path("config.yaml")
    if path.is_file():
        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        raw = _substitute_env(raw)

    return AppConfig(
        inputs=InputsConfig(**(raw.get("inputs") or {})),
        github=GitHubConfig(**(raw.get("github") or {})),
        runner=RunnerConfig(**(raw.get("runner") or {})),
        formatter=FormatterConfig(**(raw.get("formatter") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
