"""Shared fixtures: isolate tests from action/runner environment variables."""

import os

import pytest

_ENV_PREFIXES = ("INPUT_", "GITHUB_", "FORMATTER_", "LOGGING_", "RUNNER_", "ACTIONS_")
_ENV_NAMES = ("GIT_USER_NAME", "GIT_USER_EMAIL", "GIT-USER.NAME", "GIT-USER.EMAIL", "GITHUB-TOKEN")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove variables that would leak into settings."""
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIXES) or key.upper() in _ENV_NAMES:
            monkeypatch.delenv(key, raising=False)
