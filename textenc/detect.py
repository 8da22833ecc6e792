"""
Encoding detection for raw byte buffers.

Order of evidence:
- byte-order mark
- zero-byte pattern in the first 512 bytes (binary, UTF-16 LE or UTF-16 BE)
- statistical guess over at most 64 KiB, only when asked for

Everything except the statistical guess is synchronous and never raises.
"""

from __future__ import annotations

from typing import Optional

from .guess import StatisticalGuesser
from .models import DetectionResult
from .rules import (
    UTF8_BOM,
    UTF8_WITH_BOM,
    UTF16BE,
    UTF16BE_BOM,
    UTF16LE,
    UTF16LE_BOM,
    ZERO_BYTE_DETECTION_MAX_LEN,
)


def _bytes_read(data: Optional[bytes], length: Optional[int]) -> int:
    if not data:
        return 0
    if length is None:
        return len(data)
    return max(0, min(length, len(data)))


def detect_bom(data: Optional[bytes], length: Optional[int] = None) -> Optional[str]:
    """Returns 'utf8bom', 'utf16le', 'utf16be' or None."""
    n = _bytes_read(data, length)
    if n < 2:
        return None

    head = bytes(data[:2])
    if head == UTF16BE_BOM:
        return UTF16BE
    if head == UTF16LE_BOM:
        return UTF16LE

    if n < 3:
        return None
    if bytes(data[:3]) == UTF8_BOM:
        return UTF8_WITH_BOM
    return None


def scan_zero_bytes(data: Optional[bytes], length: Optional[int] = None) -> DetectionResult:
    """
    Classify the first 512 bytes as binary, UTF-16 LE or UTF-16 BE by where
    the zero bytes sit. Inconclusive (empty result) when there is no zero byte.

    UTF-16 LE puts the zero of a Latin-range code unit at odd offsets
    (0x41 0x00), UTF-16 BE at even offsets (0x00 0x41). Binary data matching
    that layout by chance, and UTF-16 text made of 4-byte sequences, are
    misclassified; that is accepted.
    """
    n = min(_bytes_read(data, length), ZERO_BYTE_DETECTION_MAX_LEN)
    could_be_le = True
    could_be_be = True
    saw_zero = False

    for i in range(n):
        odd = i % 2 == 1
        zero = data[i] == 0
        if zero:
            saw_zero = True

        if could_be_le and odd != zero:
            could_be_le = False
        if could_be_be and odd == zero:
            could_be_be = False

        if zero and not could_be_le and not could_be_be:
            break

    if not saw_zero:
        return DetectionResult()
    if could_be_le:
        return DetectionResult(encoding=UTF16LE)
    if could_be_be:
        return DetectionResult(encoding=UTF16BE)
    return DetectionResult(seems_binary=True)


def detect_encoding_sync(data: Optional[bytes], length: Optional[int] = None) -> DetectionResult:
    """BOM and zero-byte detection only."""
    encoding = detect_bom(data, length)
    if encoding in (UTF16LE, UTF16BE):
        return DetectionResult(encoding=encoding)

    scanned = scan_zero_bytes(data, length)
    if scanned.seems_binary or scanned.encoding:
        return scanned
    return DetectionResult(encoding=encoding)


async def detect_encoding(
    data: Optional[bytes],
    length: Optional[int] = None,
    auto_guess: bool = False,
    guesser: Optional[StatisticalGuesser] = None,
) -> DetectionResult:
    result = detect_encoding_sync(data, length)
    if result.seems_binary or result.encoding or not auto_guess:
        return result

    guesser = guesser or StatisticalGuesser()
    guessed = await guesser.guess_encoding(data or b"", length)
    return DetectionResult(encoding=guessed, seems_binary=False)


__all__ = ["detect_bom", "scan_zero_bytes", "detect_encoding_sync", "detect_encoding"]
