"""
Format-and-commit pipeline for one comment event.

parse comment -> validate PR -> acknowledge (reaction) -> select files ->
checkout -> format -> stage -> diff check -> commit and push, or post a
"no changes" comment. Runs once per event, strictly in that order, and
keeps no state between runs. Any collaborator error moves the pipeline to
FAILED and propagates to the caller.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from format_please.adapters.base import GitPlatformAdapter
from format_please.config import FormatterConfig
from format_please.models import Command, CommentEvent, PullRequestContext
from format_please.services.comment_parser import classify
from format_please.services.context_validator import Skip, validate
from format_please.services.file_selector import select_files
from format_please.services.format_runner import format_and_write
from format_please.services.git import (
    commit,
    configure_identity,
    diff_cached,
    fetch_and_checkout_branch,
    push,
    stage_files,
)

SKIP_NO_COMMAND = "no_command"

GIT_LOG = logging.getLogger("format_please.services.git")


class PipelineState(str, Enum):
    """States of one pipeline run."""

    IDLE = "idle"
    PARSING_COMMENT = "parsing_comment"
    VALIDATING_CONTEXT = "validating_context"
    ACKNOWLEDGED = "acknowledged"
    SELECTING_FILES = "selecting_files"
    FORMATTING = "formatting"
    STAGING = "staging"
    COMMITTED_AND_PUSHED = "committed_and_pushed"
    REPORTED_NO_CHANGE = "reported_no_change"
    SKIPPED = "skipped"
    FAILED = "failed"


class PipelineResult(BaseModel):
    """Terminal state of a run and what it worked on."""

    state: PipelineState
    skip_reason: str | None = None
    pr_number: int | None = None
    files: List[str] = Field(default_factory=list)


class FormatPipeline:
    """Runs the format-and-commit pipeline for a single comment event."""

    def __init__(
        self,
        adapter: GitPlatformAdapter,
        formatter: FormatterConfig,
        git_user_name: str,
        git_user_email: str,
        repo_dir: Path | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._formatter = formatter
        self._git_user_name = git_user_name
        self._git_user_email = git_user_email
        self._repo_dir = Path(repo_dir) if repo_dir is not None else Path.cwd()
        self._log = log or logging.getLogger("format_please.services.pipeline")
        self.state = PipelineState.IDLE
        self.history: List[PipelineState] = [PipelineState.IDLE]

    def _enter(self, state: PipelineState) -> None:
        if state in self.history:
            raise RuntimeError(f"Pipeline state {state.value} entered twice")
        self.state = state
        self.history.append(state)
        self._log.debug("Pipeline state -> %s", state.value)

    def _skip(self, reason: str, pr_number: int | None = None) -> PipelineResult:
        self._enter(PipelineState.SKIPPED)
        self._log.debug("Skipped: %s", reason)
        return PipelineResult(state=PipelineState.SKIPPED, skip_reason=reason, pr_number=pr_number)

    def run(self, event: CommentEvent) -> PipelineResult:
        """Process the event once and return its terminal state.

        Raises whatever a collaborator raises (GitPlatformError,
        GitRunnerError, FormatError); the state is FAILED in that case.
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError("FormatPipeline.run can only be called once")
        try:
            return self._run(event)
        except Exception:
            self.state = PipelineState.FAILED
            self.history.append(PipelineState.FAILED)
            self._log.error("Pipeline failed for comment %s on #%s", event.comment_id, event.issue_number)
            raise

    def _run(self, event: CommentEvent) -> PipelineResult:
        self._enter(PipelineState.PARSING_COMMENT)
        self._log.debug("Processing comment: %s", event.comment_body)
        command = classify(event.comment_body, self._formatter.trigger_phrase)
        if command is Command.NONE:
            return self._skip(SKIP_NO_COMMAND)

        self._enter(PipelineState.VALIDATING_CONTEXT)
        context = validate(self._adapter, event.repository, event.issue_number, event)
        if isinstance(context, Skip):
            return self._skip(context.reason, pr_number=event.issue_number)

        self._adapter.create_comment_reaction(event.repository, event.comment_id, self._formatter.reaction)
        self._enter(PipelineState.ACKNOWLEDGED)
        self._log.info("PR #%s: acknowledged comment %s", context.number, event.comment_id)

        return self._format_and_commit(event, context)

    def _format_and_commit(self, event: CommentEvent, context: PullRequestContext) -> PipelineResult:
        self._enter(PipelineState.SELECTING_FILES)
        files = select_files(
            self._adapter,
            event.repository,
            context.number,
            extension=self._formatter.extension,
        )

        self._enter(PipelineState.FORMATTING)
        fetch_and_checkout_branch(context.head_ref, repo_dir=self._repo_dir, log=GIT_LOG)
        for filename in files:
            format_and_write(filename, parser=self._formatter.parser, repo_dir=self._repo_dir)

        self._enter(PipelineState.STAGING)
        configure_identity(self._git_user_name, self._git_user_email, repo_dir=self._repo_dir, log=GIT_LOG)
        stage_files(files, repo_dir=self._repo_dir, log=GIT_LOG)
        diff = diff_cached(repo_dir=self._repo_dir, log=GIT_LOG)

        if diff.changed:
            commit(self._formatter.commit_message, repo_dir=self._repo_dir, log=GIT_LOG)
            push(repo_dir=self._repo_dir, log=GIT_LOG)
            self._enter(PipelineState.COMMITTED_AND_PUSHED)
            self._log.info("PR #%s: formatted %s file(s), committed and pushed", context.number, len(files))
        else:
            self._adapter.create_comment(event.repository, event.issue_number, self._formatter.no_changes_message)
            self._enter(PipelineState.REPORTED_NO_CHANGE)
            self._log.info("PR #%s: formatter made no changes", context.number)
        return PipelineResult(state=self.state, pr_number=context.number, files=files)
