"""ContextVar-based parse configuration for Quire.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse (or per Markdown instance) and read by the
lexer, parser and footnote resolver in the same context.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and concurrent parses never see each other's config.

Usage:
    # Through the public API
    result = quire.parse(source, config=ParseConfig(preserve_escapes=True))

    # Or with the context manager
    with parse_config_context(ParseConfig(duplicate_footnotes="first")):
        blocks = Parser(source).parse()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Literal

from quire.errors import ConfigError

_DUPLICATE_POLICIES = ("last", "first")


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration. It remains on the Parser instance.

    Attributes:
        duplicate_footnotes: Which definition wins when a label is defined
            twice ("last" or "first"). A diagnostic is recorded either way.
        footnote_continuation: Append indented lines that directly follow a
            footnote definition to its body.
        preserve_escapes: Emit EscapedLiteral nodes for backslash escapes
            instead of folding them into the surrounding Text.
        image_attribute_key: Attribute name for the bare ``{token}`` that may
            follow an image.

    """

    duplicate_footnotes: Literal["last", "first"] = "last"
    footnote_continuation: bool = False
    preserve_escapes: bool = False
    image_attribute_key: str = "width"

    def __post_init__(self) -> None:
        if self.duplicate_footnotes not in _DUPLICATE_POLICIES:
            raise ConfigError(
                "duplicate_footnotes",
                f"expected one of {_DUPLICATE_POLICIES}, got {self.duplicate_footnotes!r}",
            )
        if not self.image_attribute_key:
            raise ConfigError("image_attribute_key", "must be a non-empty string")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "preserve_escapes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.preserve_escapes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "quire_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local).

    Returns:
        The active ParseConfig for this thread/context.

    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(preserve_escapes=True)):
        ...     blocks = Parser("Some *text*").parse()
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
