"""Exception classes for Quire.

Parsing itself never raises on malformed Markdown: structural problems are
recovered locally and semantic problems become diagnostics on the
ParseResult. Exceptions are reserved for caller mistakes.
"""

from __future__ import annotations


class QuireError(Exception):
    """Base exception for all Quire errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidInputError(QuireError):
    """Precondition violation on the parse input.

    Raised before any parsing begins, e.g. when the source is None
    or not a string.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize with an optional source file for context.

        Args:
            message: Error description
            source_file: Path of the document being parsed (optional)
        """
        self.message = message
        self.source_file = source_file
        prefix = f"{source_file}: " if source_file else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(QuireError):
    """Invalid parse configuration value.

    Raised when a ParseConfig is built with a value outside its domain.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending ParseConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Config '{field_name}': {message}")
