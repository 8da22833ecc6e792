"""
Fixed detection rules.

This file exists to keep the magic numbers and signatures in one place.
"""

UTF8 = "utf8"
UTF8_WITH_BOM = "utf8bom"  # UTF-8 written with a BOM, read as plain utf8
UTF16LE = "utf16le"
UTF16BE = "utf16be"

UTF16BE_BOM = b"\xfe\xff"
UTF16LE_BOM = b"\xff\xfe"
UTF8_BOM = b"\xef\xbb\xbf"

ZERO_BYTE_DETECTION_MAX_LEN = 512  # bytes looked at to decide binary vs UTF-16
AUTO_GUESS_MAX_BYTES = 512 * 128   # upper limit handed to the statistical guesser

# Guesses we never accept:
# - ascii: most UTF-8 files guess as ASCII, which would then block typing non-ASCII text
# - utf-16 / utf-32: zero-byte scanning handles these more precisely
IGNORED_GUESSES = frozenset({"ascii", "utf-16", "utf-32"})

FILES_ENCODING_KEY = "files.encoding"
AUTO_GUESS_KEY = "files.autoGuessEncoding"
