"""Run the formatter on files and write the result back in place."""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Dict

import mdformat

DEFAULT_PARSER = "markdown"


class FormatError(Exception):
    """Raised when a file cannot be read, formatted or written."""

    pass


def _format_markdown(text: str) -> str:
    return mdformat.text(text)


# Parser id -> text-in/text-out formatter
FORMATTERS: Dict[str, Callable[[str], str]] = {
    "markdown": _format_markdown,
}


def format_text(text: str, parser: str = DEFAULT_PARSER) -> str:
    """Format text with the formatter registered for parser.

    Raises FormatError for an unknown parser or if the formatter rejects
    the content.
    """
    formatter = FORMATTERS.get(parser)
    if formatter is None:
        raise FormatError(f"No formatter for parser {parser!r}")
    try:
        return formatter(text)
    except Exception as e:
        raise FormatError(f"{parser} formatter failed: {e}") from e


def _write_atomic(path: Path, content: str) -> None:
    """Write content to a sibling temp file, then replace path with it."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def format_and_write(
    path: str | Path,
    parser: str = DEFAULT_PARSER,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Format one file and overwrite it with the result.

    The file is always rewritten, even when the output equals the input.
    On any failure the file is left as it was. Symlinks and paths that
    resolve outside repo_dir are rejected.

    Args:
        path: File path, relative to repo_dir unless absolute.
        parser: Formatter key (default markdown).
        repo_dir: Repository directory; uses cwd if None.
        log: Logger; defaults to this module's logger.

    Raises:
        FormatError: If reading, formatting or writing fails, or the path is a
            symlink or escapes repo_dir.
    """
    logger = log or logging.getLogger("format_please.services.format_runner")
    base = Path(repo_dir) if repo_dir is not None else Path.cwd()
    file_path = base / path
    # Links are never followed or replaced
    if file_path.is_symlink():
        raise FormatError(f"Refusing to format symlink {path}")
    try:
        file_path.resolve().relative_to(base.resolve())
    except ValueError:
        raise FormatError(f"{path} is outside the repository") from None
    try:
        original = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FormatError(f"Cannot read {path}: {e}") from e

    try:
        formatted = format_text(original, parser)
    except FormatError as e:
        raise FormatError(f"{path}: {e}") from e

    try:
        _write_atomic(file_path, formatted)
    except OSError as e:
        raise FormatError(f"Cannot write {path}: {e}") from e
    logger.debug("Formatted %s (%s)", path, "changed" if formatted != original else "unchanged")
