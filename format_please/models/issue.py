"""Issue as returned by the issue lookup (may be a pull request)."""

from pydantic import BaseModel


class Issue(BaseModel):
    """Issue or pull request seen through the issues API."""

    number: int
    state: str
    pull_request_url: str | None = None

    @property
    def is_pull_request(self) -> bool:
        """True when the issue has a pull request association."""
        return bool(self.pull_request_url)
