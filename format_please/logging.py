"""Logging for a GitHub Actions step.

Level and format come from config.yaml (logging.level, logging.format) or
env (LOGGING_LEVEL, LOGGING_FORMAT). A re-run with debug logging enabled
(RUNNER_DEBUG=1 or the ACTIONS_STEP_DEBUG secret) lowers the level to DEBUG.

Inside Actions (GITHUB_ACTIONS=true) records go to stdout, and DEBUG and
WARNING records are written as ::debug:: and ::warning:: workflow commands
so the runner folds skip traces into its debug log and annotates warnings.
"""

import logging
import os
import sys
from typing import Mapping

from format_please.config import LoggingConfig

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
}


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


def escape_command_data(message: str) -> str:
    """Escape a workflow command message so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def runner_debug_enabled(env: Mapping[str, str]) -> bool:
    """True when the job runs with step debug logging."""
    return env.get("RUNNER_DEBUG") == "1" or env.get("ACTIONS_STEP_DEBUG", "").strip().lower() == "true"


class WorkflowCommandFormatter(logging.Formatter):
    """Formats DEBUG and WARNING records as workflow commands."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        command = WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return text
        return f"::{command}::{escape_command_data(text)}"


class FormatPleaseLogging:
    """Configures the root logger from LoggingConfig and the runner environment."""

    def __init__(self, config: LoggingConfig, env: Mapping[str, str] | None = None) -> None:
        env = os.environ if env is None else env
        if runner_debug_enabled(env):
            self._level = logging.DEBUG
        else:
            self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._in_actions = env.get("GITHUB_ACTIONS") == "true"

    def setup(self) -> None:
        """Apply level and format to the root logger."""
        if not self._in_actions:
            logging.basicConfig(level=self._level, format=self._format, force=True)
            return
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WorkflowCommandFormatter(self._format))
        logging.basicConfig(level=self._level, handlers=[handler], force=True)
