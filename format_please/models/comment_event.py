"""Issue comment event (issue_comment webhook payload)."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class CommentEvent(BaseModel):
    """Comment created, edited or deleted on an issue or pull request."""

    model_config = ConfigDict(frozen=True)

    action: str
    comment_id: int
    comment_body: str = ""
    issue_number: int
    repository: str
    changes: Dict[str, Any] | None = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any], repository: str | None = None) -> "CommentEvent":
        """Build event from a GitHub issue_comment payload.

        ``repository`` is used when the payload has no ``repository.full_name``.
        Raises ValueError if the comment id, issue number or repository is missing.
        """
        comment = payload.get("comment") or {}
        issue = payload.get("issue") or {}
        repo_payload = payload.get("repository") or {}
        comment_id = comment.get("id")
        if comment_id is None:
            raise ValueError("issue_comment payload missing comment.id")
        issue_number = issue.get("number")
        if issue_number is None:
            raise ValueError("issue_comment payload missing issue.number")
        repo = repo_payload.get("full_name") or repository
        if not repo:
            raise ValueError("issue_comment payload missing repository.full_name")
        return cls(
            action=payload.get("action") or "",
            comment_id=int(comment_id),
            comment_body=comment.get("body") or "",
            issue_number=int(issue_number),
            repository=repo,
            changes=payload.get("changes"),
        )
