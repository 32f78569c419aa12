"""format-please: reformat pull request files on a comment trigger."""

__version__ = "0.1.0"
