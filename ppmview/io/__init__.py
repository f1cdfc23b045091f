from .errors import FormatError, parse_int
from .ppm import Header, decode, decode_with_header, encode_p3, encode_p6, read_header
from .sniff import select_source, sniff_encoding
from .tokens import RawByteSource, TextTokenSource, TokenSource, normalize_token

__all__ = [
    "FormatError",
    "parse_int",
    "Header",
    "decode",
    "decode_with_header",
    "read_header",
    "encode_p3",
    "encode_p6",
    "sniff_encoding",
    "select_source",
    "normalize_token",
    "TokenSource",
    "TextTokenSource",
    "RawByteSource",
]
