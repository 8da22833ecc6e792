"""
Static table of the encodings offered to users.

Entries are ordered by ``sort_order`` for display. ``utf8`` and ``utf8bom``
name each other as aliases; ``utf8bom`` is a write-only choice and is never
reported as the encoding of content being read.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .models import CatalogEntry
from .rules import UTF8, UTF8_WITH_BOM, UTF16BE, UTF16LE

_TABLE = [
    # (name, long label, short label)
    (UTF8, "UTF-8", "UTF-8"),
    (UTF8_WITH_BOM, "UTF-8 with BOM", "UTF-8 with BOM"),
    (UTF16LE, "UTF-16 LE", "UTF-16 LE"),
    (UTF16BE, "UTF-16 BE", "UTF-16 BE"),
    ("windows1252", "Western (Windows 1252)", "Windows 1252"),
    ("iso88591", "Western (ISO 8859-1)", "ISO 8859-1"),
    ("iso88593", "Western (ISO 8859-3)", "ISO 8859-3"),
    ("iso885915", "Western (ISO 8859-15)", "ISO 8859-15"),
    ("macroman", "Western (Mac Roman)", "Mac Roman"),
    ("cp437", "DOS (CP 437)", "CP437"),
    ("windows1256", "Arabic (Windows 1256)", "Windows 1256"),
    ("iso88596", "Arabic (ISO 8859-6)", "ISO 8859-6"),
    ("windows1257", "Baltic (Windows 1257)", "Windows 1257"),
    ("iso88594", "Baltic (ISO 8859-4)", "ISO 8859-4"),
    ("iso885914", "Celtic (ISO 8859-14)", "ISO 8859-14"),
    ("windows1250", "Central European (Windows 1250)", "Windows 1250"),
    ("iso88592", "Central European (ISO 8859-2)", "ISO 8859-2"),
    ("cp852", "Central European (CP 852)", "CP 852"),
    ("windows1251", "Cyrillic (Windows 1251)", "Windows 1251"),
    ("cp866", "Cyrillic (CP 866)", "CP 866"),
    ("iso88595", "Cyrillic (ISO 8859-5)", "ISO 8859-5"),
    ("koi8r", "Cyrillic (KOI8-R)", "KOI8-R"),
    ("koi8u", "Cyrillic (KOI8-U)", "KOI8-U"),
    ("iso885913", "Estonian (ISO 8859-13)", "ISO 8859-13"),
    ("windows1253", "Greek (Windows 1253)", "Windows 1253"),
    ("iso88597", "Greek (ISO 8859-7)", "ISO 8859-7"),
    ("windows1255", "Hebrew (Windows 1255)", "Windows 1255"),
    ("iso88598", "Hebrew (ISO 8859-8)", "ISO 8859-8"),
    ("iso885910", "Nordic (ISO 8859-10)", "ISO 8859-10"),
    ("iso885916", "Romanian (ISO 8859-16)", "ISO 8859-16"),
    ("windows1254", "Turkish (Windows 1254)", "Windows 1254"),
    ("iso88599", "Turkish (ISO 8859-9)", "ISO 8859-9"),
    ("windows1258", "Vietnamese (Windows 1258)", "Windows 1258"),
    ("gbk", "Simplified Chinese (GBK)", "GBK"),
    ("gb18030", "Simplified Chinese (GB18030)", "GB18030"),
    ("cp950", "Traditional Chinese (Big5)", "Big5"),
    ("big5hkscs", "Traditional Chinese (Big5-HKSCS)", "Big5-HKSCS"),
    ("shiftjis", "Japanese (Shift JIS)", "Shift JIS"),
    ("eucjp", "Japanese (EUC-JP)", "EUC-JP"),
    ("euckr", "Korean (EUC-KR)", "EUC-KR"),
    ("windows874", "Thai (Windows 874)", "Windows 874"),
    ("iso885911", "Latin/Thai (ISO 8859-11)", "ISO 8859-11"),
    ("koi8ru", "Cyrillic (KOI8-RU)", "KOI8-RU"),
    ("koi8t", "Tajik (KOI8-T)", "KOI8-T"),
    ("gb2312", "Simplified Chinese (GB 2312)", "GB 2312"),
    ("cp865", "Nordic DOS (CP 865)", "CP 865"),
    ("cp850", "Western European DOS (CP 850)", "CP 850"),
]

_ALIASES = {UTF8: UTF8_WITH_BOM, UTF8_WITH_BOM: UTF8}
_ENCODE_ONLY = {UTF8_WITH_BOM}

SUPPORTED_ENCODINGS: Dict[str, CatalogEntry] = {
    name: CatalogEntry(
        name=name,
        label_long=long_label,
        label_short=short_label,
        sort_order=order,
        encode_only=name in _ENCODE_ONLY,
        alias=_ALIASES.get(name),
    )
    for order, (name, long_label, short_label) in enumerate(_TABLE, start=1)
}


def get_entry(name: Optional[str]) -> Optional[CatalogEntry]:
    if not name:
        return None
    return SUPPORTED_ENCODINGS.get(name.lower())


def list_encodings(include_encode_only: bool = True) -> List[CatalogEntry]:
    """Catalog entries in display order."""
    entries = sorted(SUPPORTED_ENCODINGS.values(), key=lambda e: e.sort_order)
    if include_encode_only:
        return entries
    return [e for e in entries if not e.encode_only]


__all__ = ["SUPPORTED_ENCODINGS", "get_entry", "list_encodings"]
