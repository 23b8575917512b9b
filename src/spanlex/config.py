"""ContextVar-based highlight configuration for spanlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per SnippetHighlighter or context, read by every Lexer in the
context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from spanlex.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(max_line_length=2000)):
        doc = classify(source)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from spanlex.errors import ConfigError


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Attributes:
        max_line_length: Lines longer than this (in raw characters) are
            emitted as a single Plain span without running the category
            rules. None disables the bound.
        trim_snippet: Strip leading and trailing whitespace from the whole
            snippet before classifying (used by ``SnippetHighlighter``).

    """

    max_line_length: int | None = None
    trim_snippet: bool = False

    def __post_init__(self) -> None:
        if self.max_line_length is not None and self.max_line_length < 0:
            raise ConfigError("max_line_length", "must be >= 0 or None")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "max_line_length": 500,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_line_length
            500

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to the module-level default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: HighlightConfig to use within the context.

    Example:
        >>> with highlight_config_context(HighlightConfig(max_line_length=80)):
        ...     doc = classify(source)
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        config even if an exception is raised.

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
