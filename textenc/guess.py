"""
Statistical guesser adapter.

The guess itself is delegated to a pluggable callable (charset-normalizer by
default). The adapter only bounds the input size and filters out results we
do not trust.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from .codec import CODEC, Codec
from .errors import GuesserUnavailable
from .logging_setup import logger
from .rules import AUTO_GUESS_MAX_BYTES, IGNORED_GUESSES


@dataclass(frozen=True)
class GuessResult:
    label: str
    confidence: float = 0.0


GuessFn = Callable[[bytes], Union[Optional[GuessResult], Awaitable[Optional[GuessResult]]]]


def charset_normalizer_guess(sample: bytes) -> Optional[GuessResult]:
    try:
        from charset_normalizer import from_bytes
    except ImportError as e:
        raise GuesserUnavailable("charset-normalizer is not installed") from e

    best = from_bytes(sample).best()
    if best is None or not best.encoding:
        return None
    # charset-normalizer reports Python codec names (utf_8, cp1252, utf_16)
    return GuessResult(label=best.encoding.replace("_", "-"), confidence=round(1.0 - best.chaos, 3))


class StatisticalGuesser:
    def __init__(self, guess: Optional[GuessFn] = None, codec: Optional[Codec] = None):
        self._guess = guess or charset_normalizer_guess
        self.codec = codec or CODEC

    async def _call(self, sample: bytes) -> Optional[GuessResult]:
        if inspect.iscoroutinefunction(self._guess):
            return await self._guess(sample)
        result = await asyncio.to_thread(self._guess, sample)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def guess_encoding(self, data: bytes, length: Optional[int] = None) -> Optional[str]:
        """Guessed encoding name for ``data``, or None when there is no usable guess."""
        n = len(data) if length is None else min(length, len(data))
        if n <= 0:
            return None
        sample = bytes(data[:min(n, AUTO_GUESS_MAX_BYTES)])

        try:
            guessed = await self._call(sample)
        except Exception as e:
            # guessing is best effort; cancellation is a BaseException and still propagates
            logger.warning("encoding_guess_failed", error=str(e), error_type=type(e).__name__)
            return None

        if guessed is None or not guessed.label:
            return None

        label = guessed.label.lower()
        if label.replace("_", "-") in IGNORED_GUESSES:
            logger.debug("encoding_guess_ignored", label=label, confidence=guessed.confidence)
            return None

        return self.codec.normalize(self.codec.canonical_name(label))


__all__ = ["GuessResult", "GuessFn", "charset_normalizer_guess", "StatisticalGuesser"]
