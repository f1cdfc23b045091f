# ppmview/io/ppm.py
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..constants import MAX_PIXELS, SAMPLE_BYTES
from ..image import DecodedImage, Pixel
from ..image_ops import clamp, scale_channel, scale_table
from .errors import FormatError, parse_int, show_token
from .sniff import select_source
from .tokens import WHITESPACE, TokenSource

MAGICS = (b"P3", b"P6")
CHANNELS = ("r", "g", "b")


@dataclass(frozen=True)
class Header:
    magic: str
    width: int
    height: int
    maxval: int
    data_offset: int  # pozycja pierwszego bajtu danych w strumieniu tokenów

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


def _read_input(source) -> bytes:
    """bytes / ścieżka / obiekt plikowy -> cała zawartość w pamięci."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "read"):
        data = source.read()
        if not isinstance(data, (bytes, bytearray)):
            raise FormatError("could not open input", "file object is not binary")
        return bytes(data)
    try:
        with open(os.fspath(source), "rb") as f:
            return f.read()
    except OSError as e:
        raise FormatError("could not open input", f"{source}: {e.strerror or e}") from e


def _sample(data: bytes) -> str:
    return data[:SAMPLE_BYTES].decode("utf-8", errors="replace")


def _header_int(src: TokenSource, data: bytes, what: str) -> int:
    tok = src.next_token()
    offset = src.offset if tok is not None else src.pos
    try:
        return parse_int(tok, "malformed header token", what, offset)
    except FormatError as e:
        e.sample = _sample(data)
        raise


def _parse_header(src: TokenSource, data: bytes) -> Header:
    tok = src.next_token()
    if tok is None or tok not in MAGICS:
        raise FormatError(
            "not a recognized PPM magic",
            f"found {show_token(tok)}",
            src.offset if tok is not None else None,
        )
    magic = tok.decode("ascii")

    w = _header_int(src, data, "width")
    h = _header_int(src, data, "height")
    maxval = _header_int(src, data, "maxval")
    if w <= 0 or h <= 0:
        raise FormatError("invalid dimensions", f"{w}x{h}")
    if maxval <= 0:
        raise FormatError("malformed header token", f"maxval must be positive, got {maxval}")
    if not 0 < w * h <= MAX_PIXELS:
        raise FormatError("image too large or invalid", f"{w}x{h} > {MAX_PIXELS} pixels")

    if magic == "P6":
        if not src.binary_safe:
            raise FormatError("malformed header token", "binary pixel data in UTF-16 text")
        # dokładnie jeden biały znak między maxval a danymi
        sep = src.read_separator()
        if sep is None:
            raise FormatError("truncated before pixel data", offset=src.pos)
        if sep not in WHITESPACE:
            raise FormatError(
                "malformed header token",
                f"expected whitespace after maxval, got byte 0x{sep:02x}",
                src.pos - 1,
            )
    return Header(magic, w, h, maxval, src.pos)


def read_header(source) -> Header:
    """Czyta tylko nagłówek (magic, wymiary, maxval)."""
    data = _read_input(source)
    return _parse_header(select_source(data), data)


# ---------- P3 (ASCII) ----------


def _read_p3_body(src: TokenSource, hdr: Header, data: bytes) -> List[Pixel]:
    maxval = hdr.maxval
    count = hdr.pixel_count
    px: List[Pixel] = []
    rgb = [0, 0, 0]
    for i in range(count):
        for c in range(3):
            tok = src.next_token()
            if tok is None:
                raise FormatError(
                    "truncated pixel data",
                    f"pixel {i} ({CHANNELS[c]}) of {count}",
                    src.pos,
                )
            try:
                v = parse_int(tok, "invalid pixel value", f"pixel {i} ({CHANNELS[c]})", src.offset)
            except FormatError as e:
                e.sample = _sample(data)
                raise
            rgb[c] = scale_channel(v, maxval)
        px.append(Pixel(rgb[0], rgb[1], rgb[2]))
    return px


# ---------- P6 (binarny) ----------


def _read_p6_body(src: TokenSource, hdr: Header) -> List[Pixel]:
    need = hdr.pixel_count * 3
    buf = src.read_bytes(need)
    if len(buf) < need:
        raise FormatError(
            "truncated binary pixel data",
            f"expected {need} bytes, got {len(buf)} (pixel {len(buf) // 3} of {hdr.pixel_count})",
            hdr.data_offset + len(buf),
        )
    table = scale_table(hdr.maxval)
    it = iter(buf)
    return [Pixel(table[r], table[g], table[b]) for r, g, b in zip(it, it, it)]


def decode(source) -> DecodedImage:
    """
    Dekoduje PPM (P3/P6) z bajtów, ścieżki lub pliku binarnego.
    Każdy błąd (również otwarcia pliku) to FormatError; częściowy obraz nigdy
    nie jest zwracany.
    """
    return decode_with_header(source)[0]


def decode_with_header(source) -> Tuple[DecodedImage, Header]:
    data = _read_input(source)
    src = select_source(data)
    hdr = _parse_header(src, data)
    if hdr.magic == "P3":
        px = _read_p3_body(src, hdr, data)
    else:
        px = _read_p6_body(src, hdr)
    return DecodedImage(hdr.width, hdr.height, tuple(px)), hdr


# ---------- zapis ----------


def encode_p3(image: DecodedImage, maxval: int = 255, comment: Optional[str] = None) -> bytes:
    """P3: nagłówek + jeden wiersz obrazu na linię tekstu."""
    if not 0 < maxval <= 65535:
        raise ValueError(f"maxval poza zakresem 1..65535: {maxval}")
    lines = ["P3"]
    if comment:
        lines.extend(f"# {c}" for c in comment.splitlines())
    lines.append(f"{image.width} {image.height}")
    lines.append(str(maxval))
    for y in range(image.height):
        vals = []
        for p in image.row(y):
            for v in p:
                v = clamp(v)
                if maxval != 255:
                    v = (v * maxval + 127) // 255
                vals.append(str(v))
        lines.append(" ".join(vals))
    return ("\n".join(lines) + "\n").encode("ascii")


def encode_p6(image: DecodedImage) -> bytes:
    header = f"P6\n{image.width} {image.height}\n255\n".encode("ascii")
    return header + image.to_rgb_bytes()
