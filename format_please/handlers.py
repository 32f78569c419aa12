"""Handle GitHub events delivered to the action.

Only issue_comment is supported; it is turned into a CommentEvent and run
through the format pipeline. Other events are logged as errors and ignored.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from format_please.adapters.base import GitPlatformAdapter
from format_please.adapters.github import GitHubAdapter
from format_please.config import AppConfig
from format_please.models import CommentEvent
from format_please.services.pipeline import FormatPipeline, PipelineResult

SUPPORTED_EVENT = "issue_comment"


def _working_dir_from_config(config: AppConfig) -> Path:
    """Resolve the checked-out repository directory from config."""
    workspace = config.runner.workspace or "."
    return Path(workspace).resolve()


def handle_github_event(
    config: AppConfig,
    event_name: str | None,
    payload: Dict[str, Any],
    repo_dir: Path | None = None,
    adapter: GitPlatformAdapter | None = None,
    log: logging.Logger | None = None,
) -> PipelineResult | None:
    """Handle one GitHub event.

    Returns the pipeline result for issue_comment events and None for
    unsupported events. Raises ConfigError when required inputs are missing
    and propagates pipeline failures.
    """
    logger = log or logging.getLogger("format_please.handlers")
    if event_name != SUPPORTED_EVENT:
        logger.error("Event type was of unsupported type: %s", event_name)
        return None

    token, git_user_name, git_user_email = config.require_inputs()
    event = CommentEvent.from_payload(payload, repository=config.runner.repository)
    if adapter is None:
        adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    work_dir = Path(repo_dir) if repo_dir is not None else _working_dir_from_config(config)

    pipeline = FormatPipeline(
        adapter,
        config.formatter,
        git_user_name,
        git_user_email,
        repo_dir=work_dir,
    )
    result = pipeline.run(event)
    logger.info(
        "Comment %s on %s#%s: %s",
        event.comment_id,
        event.repository,
        event.issue_number,
        result.state.value,
    )
    return result
