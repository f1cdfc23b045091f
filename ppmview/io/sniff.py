# ppmview/io/sniff.py
from typing import Optional

from .tokens import UTF8_BOM, RawByteSource, TextTokenSource, TokenSource

UTF16_LE = "utf-16-le"
UTF16_BE = "utf-16-be"
UTF8_SIG = "utf-8-sig"
RAW = "raw"


def sniff_encoding(data: bytes) -> str:
    """Rozpoznaje kodowanie po pierwszych (maks. 4) bajtach."""
    head = data[:4]
    if head.startswith(b"\xff\xfe"):
        return UTF16_LE
    if head.startswith(b"\xfe\xff"):
        return UTF16_BE
    if head.startswith(UTF8_BOM):
        return UTF8_SIG
    return RAW


def to_utf8(data: bytes, encoding: str) -> Optional[bytes]:
    """
    Tekst UTF-8 bez BOM-u albo None, gdy trzeba czytać surowe bajty.
    UTF-16: nieparzysty ostatni bajt jest pomijany, błędne jednostki
    (np. samotne surogaty) zamieniane na U+FFFD.
    """
    if encoding == UTF8_SIG:
        return data[3:]
    if encoding in (UTF16_LE, UTF16_BE):
        body = data[2:]
        body = body[: len(body) - (len(body) % 2)]
        text = body.decode(encoding, errors="replace")
        if not text:
            return None
        return text.encode("utf-8")
    return None


def select_source(data: bytes) -> TokenSource:
    """Wybiera czytnik tokenów raz, po rozpoznaniu kodowania."""
    encoding = sniff_encoding(data)
    text = to_utf8(data, encoding)
    if text is None:
        return RawByteSource(data)
    return TextTokenSource(text, binary_safe=encoding == UTF8_SIG)
