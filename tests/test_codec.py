import pytest

from textenc.catalog import SUPPORTED_ENCODINGS, get_entry, list_encodings
from textenc.codec import CODEC
from textenc.errors import UnsupportedEncoding


def test_normalize_utf8_variants():
    expected = CODEC.normalize("utf8")
    assert CODEC.normalize("utf8bom") == expected
    assert CODEC.normalize(None) == expected
    assert CODEC.normalize("") == expected
    assert CODEC.normalize("windows1252") == "windows1252"


def test_exists():
    assert CODEC.exists("utf8")
    assert CODEC.exists("utf8bom")
    assert CODEC.exists("UTF-8")
    assert CODEC.exists("windows1252")
    assert CODEC.exists("latin-1")
    assert not CODEC.exists("no-such-encoding")
    # registered with Python, but not a text encoding
    assert not CODEC.exists("base64")


def test_unknown_encoding_raises():
    with pytest.raises(UnsupportedEncoding) as exc:
        CODEC.decode(b"abc", "no-such-encoding")
    assert exc.value.encoding == "no-such-encoding"
    with pytest.raises(LookupError):
        CODEC.encode("abc", "no-such-encoding")


@pytest.mark.parametrize("name", sorted(SUPPORTED_ENCODINGS))
def test_catalog_round_trip(name):
    text = "Hello, World! 0123456789 (plain ascii)"
    assert CODEC.exists(name)
    assert CODEC.decode(CODEC.encode(text, name, False), name) == text


def test_encode_utf8_fast_path():
    assert CODEC.encode("héllo", None) == "héllo".encode("utf-8")
    assert CODEC.encode("héllo", "utf8") == "héllo".encode("utf-8")


def test_encode_with_bom():
    assert CODEC.encode("hi", "utf8", add_bom=True) == b"\xef\xbb\xbfhi"
    assert CODEC.encode("hi", "utf8bom", add_bom=True) == b"\xef\xbb\xbfhi"
    assert CODEC.encode("hi", "utf16le", add_bom=True) == b"\xff\xfeh\x00i\x00"
    assert CODEC.encode("hi", "utf16be", add_bom=True) == b"\xfe\xff\x00h\x00i"
    # single-byte encodings have no BOM
    assert CODEC.encode("hi", "windows1252", add_bom=True) == b"hi"


def test_utf8bom_name_writes_no_bom_by_itself():
    assert CODEC.encode("hi", "utf8bom") == b"hi"


def test_decode_strips_bom():
    assert CODEC.decode(b"\xef\xbb\xbfhi", "utf8") == "hi"
    assert CODEC.decode(b"\xff\xfeh\x00i\x00", "utf16le") == "hi"


def test_decode_malformed_input_is_replaced():
    assert CODEC.decode(b"ok\xff", "utf8") == "ok\ufffd"


def test_unmappable_characters_are_replaced_on_encode():
    assert CODEC.encode("a中b", "windows1252") == b"a?b"


def test_non_ascii_single_byte():
    assert CODEC.encode("é", "windows1252") == b"\xe9"
    assert CODEC.decode(b"\xe9", "iso88591") == "é"


@pytest.mark.parametrize(
    "label,expected",
    [
        ("UTF-8", "utf8"),
        ("utf_8", "utf8"),
        ("cp1252", "windows1252"),
        ("Windows-1252", "windows1252"),
        ("latin-1", "iso88591"),
        ("SHIFT_JIS", "shiftjis"),
        ("utf-16le", "utf16le"),
        ("utf8bom", "utf8"),
        ("Made-Up", "made-up"),
    ],
)
def test_canonical_name(label, expected):
    assert CODEC.canonical_name(label) == expected


# ---- catalog ---------------------------------------------------------------
def test_catalog_aliases_resolve():
    for entry in SUPPORTED_ENCODINGS.values():
        assert entry.name == entry.name.lower()
        if entry.alias:
            assert entry.alias in SUPPORTED_ENCODINGS
    assert get_entry("utf8").alias == "utf8bom"
    assert get_entry("UTF8BOM").alias == "utf8"


def test_catalog_order_and_encode_only():
    entries = list_encodings()
    orders = [e.sort_order for e in entries]
    assert orders == sorted(orders)
    assert len(set(orders)) == len(orders)
    assert entries[0].name == "utf8"

    encode_only = [e.name for e in entries if e.encode_only]
    assert encode_only == ["utf8bom"]
    assert "utf8bom" not in [e.name for e in list_encodings(include_encode_only=False)]


def test_catalog_entries_are_immutable():
    entry = get_entry("utf8")
    with pytest.raises(Exception):
        entry.sort_order = 99


@pytest.mark.parametrize("name", ["latin\x00x", "utf\x008", "utf-8\x00", "u t f 8 !"])
def test_malformed_names_do_not_exist(name):
    assert CODEC.exists(name) is False
    with pytest.raises(UnsupportedEncoding):
        CODEC.decode(b"abc", name)


def test_lenient_names():
    assert CODEC.exists("UTF 8")
    assert CODEC.exists("Windows_1252")
    assert CODEC.exists("iso.8859.15")


def test_koi8ru_short_u():
    assert CODEC.decode(b"\xae\xbe", "koi8ru") == "ўЎ"
    assert CODEC.encode("Ўў", "koi8ru") == b"\xbe\xae"
    # elsewhere identical to KOI8-U
    assert CODEC.decode(b"\xad\xc1", "koi8ru") == CODEC.decode(b"\xad\xc1", "koi8u")
    assert CODEC.decode(b"\xae", "koi8u") != "ў"
    assert CODEC.canonical_name("KOI8-RU") == "koi8ru"
