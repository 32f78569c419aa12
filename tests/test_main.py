"""Tests for the format-please entry point."""

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from format_please.config import ConfigError
from format_please.main import load_event_payload, main, parse_args, set_failed


@pytest.fixture(autouse=True)
def restore_root_logger() -> None:
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def inputs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INPUT_GITHUB-TOKEN", "tok")
    monkeypatch.setenv("INPUT_GIT-USER.NAME", "Bot")
    monkeypatch.setenv("INPUT_GIT-USER.EMAIL", "bot@example.com")


def _event_file(tmp_path: Path) -> Path:
    path = tmp_path / "event.json"
    path.write_text(
        json.dumps(
            {
                "action": "created",
                "comment": {"id": 1, "body": "prettier, please!"},
                "issue": {"number": 2},
                "repository": {"full_name": "owner/repo"},
            }
        )
    )
    return path


def test_parse_args_defaults() -> None:
    """Defaults: config.yaml, no overrides."""
    args = parse_args([])
    assert args.config == Path("config.yaml")
    assert args.event_name is None
    assert args.event_path is None
    assert args.repo_dir is None
    assert args.check is False


def test_main_handles_issue_comment(tmp_path: Path, inputs: None) -> None:
    """Event name and payload from CLI are passed to the handler."""
    event_path = _event_file(tmp_path)
    with patch("format_please.main.handle_github_event") as handle:
        code = main(
            [
                "--config",
                str(tmp_path / "none.yaml"),
                "--event-name",
                "issue_comment",
                "--event-path",
                str(event_path),
                "--repo-dir",
                str(tmp_path),
            ]
        )

    assert code == 0
    _, event_name, payload = handle.call_args[0]
    assert event_name == "issue_comment"
    assert payload["comment"]["id"] == 1
    assert handle.call_args[1]["repo_dir"] == tmp_path


def test_main_reads_runner_env(tmp_path: Path, inputs: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """GITHUB_EVENT_NAME and GITHUB_EVENT_PATH are used when no flags are given."""
    monkeypatch.setenv("GITHUB_EVENT_NAME", "issue_comment")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(_event_file(tmp_path)))
    with patch("format_please.main.handle_github_event") as handle:
        code = main(["--config", str(tmp_path / "none.yaml")])

    assert code == 0
    assert handle.call_args[0][1] == "issue_comment"
    assert handle.call_args[0][2]["issue"]["number"] == 2


def test_main_unsupported_event_succeeds(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Unsupported events exit 0 without reading a payload."""
    code = main(["--config", str(tmp_path / "none.yaml"), "--event-name", "push"])

    assert code == 0
    assert "::error::" not in capsys.readouterr().out


def test_main_failure_sets_failed(tmp_path: Path, inputs: None, capsys: pytest.CaptureFixture) -> None:
    """Handler errors exit 1 with an ::error:: annotation."""
    event_path = _event_file(tmp_path)
    with patch("format_please.main.handle_github_event", side_effect=RuntimeError("git push: rejected")):
        code = main(
            ["--config", str(tmp_path / "none.yaml"), "--event-name", "issue_comment", "--event-path", str(event_path)]
        )

    assert code == 1
    assert "::error::git push: rejected" in capsys.readouterr().out


def test_main_missing_event_path_fails(tmp_path: Path, inputs: None, capsys: pytest.CaptureFixture) -> None:
    """issue_comment without a payload path is a failure."""
    code = main(["--config", str(tmp_path / "none.yaml"), "--event-name", "issue_comment"])

    assert code == 1
    assert "::error::No event payload path" in capsys.readouterr().out


def test_main_check(tmp_path: Path, inputs: None, capsys: pytest.CaptureFixture) -> None:
    """--check validates config and exits 0."""
    code = main(["--config", str(tmp_path / "none.yaml"), "--check"])

    assert code == 0
    assert "Config OK" in capsys.readouterr().out


def test_main_check_missing_inputs(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """--check fails when required inputs are missing."""
    code = main(["--config", str(tmp_path / "none.yaml"), "--check"])

    assert code == 1
    assert "Input required and not supplied" in capsys.readouterr().out


def test_load_event_payload_errors(tmp_path: Path) -> None:
    """Missing, unreadable or non-object payloads raise ConfigError."""
    with pytest.raises(ConfigError):
        load_event_payload(None)
    with pytest.raises(ConfigError, match="Cannot read"):
        load_event_payload(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigError, match="Invalid"):
        load_event_payload(bad)
    listing = tmp_path / "list.json"
    listing.write_text("[]")
    with pytest.raises(ConfigError, match="not a JSON object"):
        load_event_payload(listing)


def test_set_failed_escapes_newlines(capsys: pytest.CaptureFixture) -> None:
    """Multi-line messages stay on one workflow command line."""
    set_failed("line one\nline two 100%")
    assert capsys.readouterr().out == "::error::line one%0Aline two 100%25\n"


def test_main_interrupt_sets_failed(tmp_path: Path, inputs: None, capsys: pytest.CaptureFixture) -> None:
    """A cancelled run exits 1 and says why."""
    event_path = _event_file(tmp_path)
    with patch("format_please.main.handle_github_event", side_effect=KeyboardInterrupt):
        code = main(
            ["--config", str(tmp_path / "none.yaml"), "--event-name", "issue_comment", "--event-path", str(event_path)]
        )

    assert code == 1
    assert "::error::Interrupted" in capsys.readouterr().out
