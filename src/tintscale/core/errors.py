"""
Error types for tintscale color parsing, scale generation, and configuration.
"""

from dataclasses import dataclass


class TintscaleError(Exception):
    """Base exception for all tintscale errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class ParseError(TintscaleError):
    """
    Raised when a color string cannot be parsed.

    Examples:
    - Malformed hex (``#12``, ``#GGGGGG``)
    - Unknown color keyword
    - Broken ``oklch(...)`` expression

    Fatal for the single color being generated, never defaulted to black
    or white.
    """

    pass


class GamutSearchDegenerate(TintscaleError):
    """
    Raised when chroma reduction cannot reach a displayable color.

    Only reachable when even the achromatic color at the requested
    lightness lies outside sRGB, which valid lightness values never do.
    """

    pass


class ScaleDefinitionError(TintscaleError):
    """
    Raised when a scale definition is structurally invalid.

    Examples:
    - Chroma table with other than 10 entries
    - Pin step outside 0-9
    - Lightness curve that is not monotonically non-increasing
    """

    pass


class PaletteConfigError(TintscaleError):
    """Raised when a palette configuration file cannot be loaded or saved."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error: which color and, optionally, which step.

    Attributes:
        color: Name of the color definition being generated
        step: Optional step index (0-9)
        value: Optional raw input value that triggered the error
    """

    color: str
    step: int | None = None
    value: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "copper[4] ('#FF7A5')"
        """
        location = self.color
        if self.step is not None:
            location += f"[{self.step}]"
        if self.value is not None:
            location += f" ({self.value!r})"
        return location


def with_context(
    error: TintscaleError,
    color: str,
    step: int | None = None,
) -> TintscaleError:
    """
    Return a copy of *error* with color/step context attached.

    Keeps the original exception type so callers can still match on it;
    the original error becomes ``__cause__`` and its traceback is carried over.

    Args:
        error: Error raised without context
        color: Color definition name
        step: Optional step index

    Returns:
        New error of the same type carrying an ErrorContext
    """
    if error.context is not None:
        return error
    new = type(error)(error.message, ErrorContext(color=color, step=step))
    new.__cause__ = error
    return new.with_traceback(error.__traceback__)
