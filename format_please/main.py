"""format-please entry point.

Runs once per GitHub Actions job step: reads the event name and payload
the runner provides (GITHUB_EVENT_NAME, GITHUB_EVENT_PATH), handles it, and
exits non-zero with an ::error:: annotation if anything fails.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from format_please.config import AppConfig, ConfigError, load_config
from format_please.handlers import handle_github_event
from format_please.logging import FormatPleaseLogging, escape_command_data


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="format-please",
        description="Reformat pull request files when asked to in a comment",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--event-name",
        default=None,
        help="Event name (default: GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="Path to event payload JSON (default: GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--repo-dir",
        type=Path,
        default=None,
        help="Repository working directory (default: GITHUB_WORKSPACE or cwd)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def load_event_payload(path: Path | None) -> Dict[str, Any]:
    """Read the event payload JSON; raise ConfigError if it is missing or invalid."""
    if path is None:
        raise ConfigError("No event payload path (set GITHUB_EVENT_PATH or --event-path)")
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid event payload {path}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"Event payload {path} is not a JSON object")
    return payload


def set_failed(message: str) -> None:
    """Report failure to the Actions runner as an error annotation."""
    print(f"::error::{escape_command_data(message)}", flush=True)


def run(config: AppConfig, args: argparse.Namespace) -> None:
    """Handle the event described by args and config."""
    event_name = args.event_name or config.runner.event_name
    event_path = args.event_path or (Path(config.runner.event_path) if config.runner.event_path else None)
    payload = load_event_payload(event_path) if event_name == "issue_comment" else {}
    handle_github_event(config, event_name, payload, repo_dir=args.repo_dir)


def main(argv: list[str] | None = None) -> int:
    """Entry point for format-please."""
    args = parse_args(argv)
    log = logging.getLogger("format_please")
    try:
        config = load_config(args.config)
        FormatPleaseLogging(config.logging).setup()
        if args.check:
            config.require_inputs()
            print("Config OK:", config.formatter.trigger_phrase, config.formatter.extension)
            return 0
        run(config, args)
    except KeyboardInterrupt:
        log.error("Interrupted")
        set_failed("Interrupted")
        return 1
    except Exception as e:
        log.exception("Fatal error: %s", e)
        set_failed(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
