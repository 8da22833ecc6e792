"""
KOI8-RU charmap codec.

Python ships KOI8-U but not KOI8-RU. The two tables are identical except
for 0xAE and 0xBE, which KOI8-RU uses for the Belarusian short U.
"""

import codecs
from encodings import koi8_u

NAME = "koi8-ru"

_table = list(koi8_u.decoding_table)
_table[0xAE] = "\u045e"  # CYRILLIC SMALL LETTER SHORT U
_table[0xBE] = "\u040e"  # CYRILLIC CAPITAL LETTER SHORT U
decoding_table = "".join(_table)
encoding_table = codecs.charmap_build(decoding_table)


class Codec(codecs.Codec):
    def encode(self, input, errors="strict"):
        return codecs.charmap_encode(input, errors, encoding_table)

    def decode(self, input, errors="strict"):
        return codecs.charmap_decode(input, errors, decoding_table)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):
        return codecs.charmap_encode(input, self.errors, encoding_table)[0]


class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input, final=False):
        return codecs.charmap_decode(input, self.errors, decoding_table)[0]


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def getregentry():
    return codecs.CodecInfo(
        name=NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def search(name):
    # codecs.lookup hands over lower-cased names; hyphens may already be underscores
    if name.replace("-", "_") == "koi8_ru":
        return getregentry()
    return None
