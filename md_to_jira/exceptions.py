"""Package-specific exception types."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for conversion-related errors.

    `convert` never lets these escape; they signal that a stage could not
    run and that the input should be returned unchanged.
    """


class PlaceholderSpaceExhaustedError(ConversionError):
    """Raised when no sentinel code point is absent from the text.

    Args:
        candidates: Number of code points that were tried.
    """

    def __init__(self, candidates: int):
        self.candidates = candidates
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"No placeholder sentinel available: all {self.candidates} "
            "private-use code points occur in the input"
        )
