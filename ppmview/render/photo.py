# ppmview/render/photo.py
from typing import Sequence

from ..image import DecodedImage, Pixel


def row_hex(row: Sequence[Pixel]) -> str:
    """Wiersz pikseli w formacie przyjmowanym przez PhotoImage.put()."""
    return "{" + " ".join(f"#{r:02x}{g:02x}{b:02x}" for (r, g, b) in row) + "}"


def photo_from_image(image: DecodedImage):
    """Buduje tk.PhotoImage z obrazu – put() wierszami od góry."""
    import tkinter as tk

    img = tk.PhotoImage(width=image.width, height=image.height)
    for y in range(image.height):
        img.put(row_hex(image.row(y)), to=(0, y))
    return img
