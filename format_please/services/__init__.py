"""Pipeline services: comment parsing, validation, file selection, formatting, git."""
