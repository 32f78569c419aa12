"""Tests for event dispatch (handle_github_event)."""

import logging
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from format_please.config import AppConfig, ConfigError, InputsConfig, RunnerConfig
from format_please.handlers import handle_github_event
from format_please.services.pipeline import FormatPipeline, PipelineResult, PipelineState


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(
        inputs=InputsConfig(github_token="tok", git_user_name="Bot", git_user_email="bot@example.com"),
        runner=RunnerConfig(workspace="/tmp/workspace"),
    )


def _payload(body: str = "prettier, please!", action: str = "created") -> dict:
    return {
        "action": action,
        "comment": {"id": 11, "body": body},
        "issue": {"number": 7},
        "repository": {"full_name": "owner/repo"},
    }


def test_unsupported_event_logs_error_and_does_nothing(config: AppConfig, caplog: pytest.LogCaptureFixture) -> None:
    """Events other than issue_comment are logged and ignored."""
    with patch("format_please.handlers.FormatPipeline") as pipeline_cls:
        with caplog.at_level(logging.ERROR, logger="format_please.handlers"):
            result = handle_github_event(config, "push", {})

    assert result is None
    pipeline_cls.assert_not_called()
    assert "Event type was of unsupported type: push" in caplog.text


def test_unsupported_event_does_not_need_inputs() -> None:
    """Missing inputs do not matter for ignored events."""
    assert handle_github_event(AppConfig(), "pull_request", {}) is None


def test_issue_comment_runs_pipeline(config: AppConfig) -> None:
    """issue_comment builds the event and runs the pipeline with config values."""
    adapter = Mock()
    expected = PipelineResult(state=PipelineState.SKIPPED, skip_reason="no_command")
    with patch("format_please.handlers.FormatPipeline") as pipeline_cls:
        pipeline_cls.return_value.run.return_value = expected
        result = handle_github_event(config, "issue_comment", _payload(), adapter=adapter)

    assert result is expected
    args, kwargs = pipeline_cls.call_args
    assert args[0] is adapter
    assert args[1] is config.formatter
    assert args[2:] == ("Bot", "bot@example.com")
    assert kwargs["repo_dir"] == Path("/tmp/workspace").resolve()
    event = pipeline_cls.return_value.run.call_args[0][0]
    assert event.comment_id == 11
    assert event.issue_number == 7
    assert event.repository == "owner/repo"


def test_issue_comment_builds_github_adapter(config: AppConfig, tmp_path: Path) -> None:
    """Without an injected adapter a GitHubAdapter is built from token and API URL."""
    with patch("format_please.handlers.GitHubAdapter") as adapter_cls:
        with patch("format_please.handlers.FormatPipeline") as pipeline_cls:
            handle_github_event(config, "issue_comment", _payload(), repo_dir=tmp_path)

    adapter_cls.assert_called_once_with(token="tok", api_url="https://api.github.com")
    assert pipeline_cls.call_args[0][0] is adapter_cls.return_value
    assert pipeline_cls.call_args[1]["repo_dir"] == tmp_path


def test_issue_comment_non_command_end_to_end(config: AppConfig) -> None:
    """A regular comment is skipped without touching the API."""
    adapter = Mock()
    result = handle_github_event(config, "issue_comment", _payload(body="nice work"), adapter=adapter)

    assert result.state is PipelineState.SKIPPED
    assert adapter.mock_calls == []


def test_issue_comment_without_inputs_raises() -> None:
    """issue_comment with missing inputs is a configuration failure."""
    with pytest.raises(ConfigError):
        handle_github_event(AppConfig(), "issue_comment", _payload(), adapter=Mock())


def test_malformed_payload_raises(config: AppConfig) -> None:
    """Payloads without the comment id fail loudly."""
    with pytest.raises(ValueError):
        handle_github_event(config, "issue_comment", {"action": "created", "issue": {"number": 1}}, adapter=Mock())


def test_pipeline_failure_propagates(config: AppConfig) -> None:
    """Errors from the pipeline reach the caller."""
    with patch("format_please.handlers.FormatPipeline") as pipeline_cls:
        pipeline_cls.return_value.run.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError, match="boom"):
            handle_github_event(config, "issue_comment", _payload(), adapter=Mock())


def test_components_log_under_their_own_names(config: AppConfig, caplog: pytest.LogCaptureFixture) -> None:
    """The pipeline is not handed the handler's logger; each module logs under its own name."""
    adapter = Mock()
    with patch("format_please.handlers.FormatPipeline", wraps=FormatPipeline) as pipeline_cls:
        with caplog.at_level(logging.DEBUG, logger="format_please"):
            result = handle_github_event(config, "issue_comment", _payload(action="deleted"), adapter=adapter)

    assert "log" not in pipeline_cls.call_args[1]
    assert result.skip_reason == "comment_deleted"
    names = {r.name for r in caplog.records}
    assert "format_please.services.context_validator" in names
    assert "format_please.services.pipeline" in names
    assert "format_please.handlers" in names
