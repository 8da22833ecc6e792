"""
Codec adapter: maps encoding names onto Python's codec registry.

Names are matched leniently (case, hyphens, underscores, dots and spaces
are ignored, so ``UTF-8`` and ``utf8`` are the same encoding). Catalog names
that Python spells differently go through a static table; anything else is
handed to ``codecs.lookup``.

BOM handling is layered on top: ``utf8bom`` is read as plain ``utf8`` and the
mark itself is written or stripped here, never by the underlying codec.
"""

from __future__ import annotations

import codecs
import re
from functools import lru_cache
from typing import Dict, Optional

from . import koi8_ru
from .errors import UnsupportedEncoding
from .rules import UTF8, UTF8_BOM, UTF8_WITH_BOM, UTF16BE_BOM, UTF16LE_BOM

# catalog name -> Python codec name
_PYTHON_CODECS: Dict[str, str] = {
    "utf8": "utf-8",
    "utf16le": "utf-16-le",
    "utf16be": "utf-16-be",
    "windows1250": "cp1250",
    "windows1251": "cp1251",
    "windows1252": "cp1252",
    "windows1253": "cp1253",
    "windows1254": "cp1254",
    "windows1255": "cp1255",
    "windows1256": "cp1256",
    "windows1257": "cp1257",
    "windows1258": "cp1258",
    "windows874": "cp874",
    "iso88591": "latin-1",
    "iso88592": "iso8859-2",
    "iso88593": "iso8859-3",
    "iso88594": "iso8859-4",
    "iso88595": "iso8859-5",
    "iso88596": "iso8859-6",
    "iso88597": "iso8859-7",
    "iso88598": "iso8859-8",
    "iso88599": "iso8859-9",
    "iso885910": "iso8859-10",
    "iso885911": "iso8859-11",
    "iso885913": "iso8859-13",
    "iso885914": "iso8859-14",
    "iso885915": "iso8859-15",
    "iso885916": "iso8859-16",
    "macroman": "mac-roman",
    "cp437": "cp437",
    "cp850": "cp850",
    "cp852": "cp852",
    "cp865": "cp865",
    "cp866": "cp866",
    "cp950": "cp950",
    "koi8r": "koi8-r",
    "koi8u": "koi8-u",
    "koi8ru": koi8_ru.NAME,
    "koi8t": "koi8-t",
    "gbk": "gbk",
    "gb2312": "gb2312",
    "gb18030": "gb18030",
    "big5hkscs": "big5hkscs",
    "shiftjis": "shift_jis",
    "eucjp": "euc_jp",
    "euckr": "euc_kr",
}

codecs.register(koi8_ru.search)

# registry name (as reported by codecs.lookup) -> catalog name
_CATALOG_NAMES: Dict[str, str] = {
    codecs.lookup(py).name: name for name, py in _PYTHON_CODECS.items()
}

# byte-order marks by registry name; other encodings ignore add_bom
_BOMS: Dict[str, bytes] = {
    "utf-8": UTF8_BOM,
    "utf-16-le": UTF16LE_BOM,
    "utf-16-be": UTF16BE_BOM,
}

_PUNCT_RE = re.compile(r"[-_. ]")


def _key(name: str) -> str:
    return _PUNCT_RE.sub("", name.lower())


@lru_cache(maxsize=256)
def _lookup(name: str) -> Optional[str]:
    """Registry name for ``name``, or None when Python has no text codec for it."""
    py = _PYTHON_CODECS.get(_key(name), name)
    try:
        info = codecs.lookup(py)
        # bytes-to-bytes codecs (base64, zlib...) are registered too; str.encode rejects them
        "".encode(info.name)
    except (LookupError, ValueError):
        # ValueError: names with embedded NULs
        return None
    return info.name


class Codec:
    """Byte <-> text conversion keyed by encoding name."""

    def normalize(self, name: Optional[str] = None) -> str:
        if not name or name == UTF8_WITH_BOM:
            return UTF8
        return name

    def python_codec(self, name: Optional[str] = None) -> Optional[str]:
        return _lookup(self.normalize(name))

    def exists(self, name: Optional[str] = None) -> bool:
        return self.python_codec(name) is not None

    def canonical_name(self, label: Optional[str]) -> str:
        """
        Catalog spelling of ``label`` when it names a catalog encoding
        (``UTF-8`` -> ``utf8``, ``cp1252`` -> ``windows1252``), else the
        label lower-cased.
        """
        name = self.normalize(label)
        py = _lookup(name)
        if py is not None and py in _CATALOG_NAMES:
            return _CATALOG_NAMES[py]
        return name.lower()

    def _require(self, name: Optional[str]) -> str:
        py = self.python_codec(name)
        if py is None:
            raise UnsupportedEncoding(name)
        return py

    def decode(self, data: bytes, name: Optional[str] = None) -> str:
        py = self._require(name)
        text = bytes(data).decode(py, errors="replace")
        if text.startswith("\ufeff"):
            text = text[1:]
        return text

    def encode(self, text: str, name: Optional[str] = None, add_bom: bool = False) -> bytes:
        if self.normalize(name) == UTF8 and not add_bom:
            return text.encode("utf-8")
        py = self._require(name)
        data = text.encode(py, errors="replace")
        if add_bom:
            data = _BOMS.get(py, b"") + data
        return data


CODEC = Codec()

__all__ = ["Codec", "CODEC"]
