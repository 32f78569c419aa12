"""Classify comment bodies into commands."""

from format_please.models import Command

DEFAULT_TRIGGER_PHRASE = "prettier, please!"


def _normalize(text: str) -> str:
    return text.strip().lower()


def classify(body: str | None, trigger_phrase: str = DEFAULT_TRIGGER_PHRASE) -> Command:
    """Return Command.TRIGGER if the trimmed, lower-cased body starts with the phrase.

    This is a prefix test: the phrase anywhere but the start does not count.
    Empty or missing bodies are Command.NONE.

    Args:
        body: Raw comment body.
        trigger_phrase: Phrase the comment must start with (case-insensitive).

    Returns:
        Command.TRIGGER or Command.NONE.
    """
    phrase = _normalize(trigger_phrase or "")
    if not body or not phrase:
        return Command.NONE
    if _normalize(body).startswith(phrase):
        return Command.TRIGGER
    return Command.NONE
