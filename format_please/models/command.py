"""Commands recognized in comment bodies."""

from enum import Enum


class Command(str, Enum):
    """Closed set of commands a comment can carry."""

    TRIGGER = "trigger"
    NONE = "none"
