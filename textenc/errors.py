from __future__ import annotations

from typing import Optional


class EncodingError(Exception):
    """Base error for encoding handling."""


class UnsupportedEncoding(EncodingError, LookupError):
    """Raised when a transcode is requested for an encoding the codec registry does not know."""

    def __init__(self, encoding: Optional[str]):
        self.encoding = encoding
        super().__init__(f"Unsupported encoding '{encoding}'.")


class GuesserUnavailable(EncodingError):
    """Raised when the statistical guesser cannot be loaded or run."""


class BinaryContent(EncodingError):
    """Raised when text is requested from content that was classified as binary."""


__all__ = [
    "EncodingError",
    "UnsupportedEncoding",
    "GuesserUnavailable",
    "BinaryContent",
]
