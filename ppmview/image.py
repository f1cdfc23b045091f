# ppmview/image.py
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

from .constants import PLACEHOLDER_SIZE


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class DecodedImage:
    """
    Zdekodowany obraz: piksele RGB wierszami od góry, len(pixels) == width*height.
    Obiekt jest niemutowalny – właściciel podmienia go w całości.
    """

    width: int
    height: int
    pixels: Tuple[Pixel, ...]

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Nieprawidłowy rozmiar obrazu: {self.width}x{self.height}")
        if not isinstance(self.pixels, tuple):
            object.__setattr__(self, "pixels", tuple(self.pixels))
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Liczba pikseli {len(self.pixels)} != {self.width}*{self.height}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def row(self, y: int) -> Sequence[Pixel]:
        base = y * self.width
        return self.pixels[base : base + self.width]

    def to_rgb_bytes(self) -> bytes:
        out = bytearray(len(self.pixels) * 3)
        i = 0
        for r, g, b in self.pixels:
            out[i] = r
            out[i + 1] = g
            out[i + 2] = b
            i += 3
        return bytes(out)


def to_bgrx(image: DecodedImage) -> bytes:
    """
    Serializacja 4 bajty/piksel w kolejności (B, G, R, 0) – układ oczekiwany
    przez 32-bitowe bitmapy typu DIB. Czwarty bajt to wypełnienie.
    """
    out = bytearray(len(image.pixels) * 4)
    i = 0
    for r, g, b in image.pixels:
        out[i] = b
        out[i + 1] = g
        out[i + 2] = r
        i += 4
    return bytes(out)


def placeholder_gradient(
    width: int = PLACEHOLDER_SIZE[0], height: int = PLACEHOLDER_SIZE[1]
) -> DecodedImage:
    """Gradient: czerwony rośnie w prawo, zielony w dół, niebieski stały."""
    px = []
    for y in range(height):
        g = (y * 255) // height
        for x in range(width):
            px.append(Pixel((x * 255) // width, g, 128))
    return DecodedImage(width, height, tuple(px))
