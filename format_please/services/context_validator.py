"""Check that a comment event targets an open pull request.

The issue number in an issue_comment payload is shared by issues and pull
requests, so the issue is fetched again and its pull request association
checked instead of trusting the payload shape.
"""

import logging

from pydantic import BaseModel, ConfigDict

from format_please.adapters.base import GitPlatformAdapter
from format_please.models import CommentEvent, PullRequestContext

SKIP_COMMENT_DELETED = "comment_deleted"
SKIP_NOT_PULL_REQUEST = "not_pull_request"
SKIP_NOT_OPEN = "not_open"


class Skip(BaseModel):
    """Event should be ignored; not an error."""

    model_config = ConfigDict(frozen=True)

    reason: str


def validate(
    adapter: GitPlatformAdapter,
    repo: str,
    issue_number: int,
    event: CommentEvent,
    log: logging.Logger | None = None,
) -> PullRequestContext | Skip:
    """Resolve the pull request behind a comment or return Skip.

    Deleted comments are skipped before any API call. Edited comments are
    handled like new ones. Raises GitPlatformError if a lookup fails.
    """
    logger = log or logging.getLogger("format_please.services.context_validator")
    if event.action == "deleted":
        logger.debug("Comment %s was deleted, skipping", event.comment_id)
        return Skip(reason=SKIP_COMMENT_DELETED)

    issue = adapter.get_issue(repo, issue_number)
    if not issue.is_pull_request:
        logger.debug("Ran, but #%s is an issue and not a pull request", issue_number)
        return Skip(reason=SKIP_NOT_PULL_REQUEST)
    if issue.state != "open":
        logger.debug("Pull request #%s is not open (state=%s)", issue_number, issue.state)
        return Skip(reason=SKIP_NOT_OPEN)

    pr = adapter.get_pr_by_url(issue.pull_request_url or "")
    return PullRequestContext(
        number=pr.number,
        state=issue.state,
        head_ref=pr.head_ref,
        is_pull_request=True,
    )
