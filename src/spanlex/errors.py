"""Exception classes for spanlex.

Classification itself never raises: any text yields a Document. These
exceptions cover the surrounding surfaces (verification, rendering,
serialization, configuration).
"""

from __future__ import annotations


class SpanlexError(Exception):
    """Base exception for all spanlex errors.

    Subclass this for specific error categories.
    """

    pass


class PartitionError(SpanlexError):
    """A Line's spans do not reconstruct its source line.

    Raised by ``Line.verify()``. Indicates a classifier defect, never bad
    input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize partition error with optional location.

        Args:
            message: Error description
            lineno: Line number of the offending line (1-indexed)
            col_offset: Column of the first mismatch (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class RenderError(SpanlexError):
    """Error during markup rendering.

    Raised when a renderer meets a span it cannot map to output.
    """

    pass


class SerializationError(SpanlexError):
    """Error converting a Document to or from its dict/JSON form."""

    pass


class ConfigError(SpanlexError):
    """Invalid highlight configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending HighlightConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Config '{field_name}': {message}")
