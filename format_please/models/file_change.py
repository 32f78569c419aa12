"""File changed in a pull request."""

from pydantic import BaseModel


class FileChange(BaseModel):
    """One entry of the pull request file list (filename and change status)."""

    filename: str
    status: str
