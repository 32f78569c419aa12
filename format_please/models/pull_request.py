"""Validated pull request context."""

from pydantic import BaseModel, ConfigDict


class PullRequestContext(BaseModel):
    """Open pull request the pipeline works on, with its head branch."""

    model_config = ConfigDict(frozen=True)

    number: int
    state: str
    head_ref: str
    is_pull_request: bool = True
