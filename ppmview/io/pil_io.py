# ppmview/io/pil_io.py
from pathlib import Path

try:
    from PIL import Image
except ImportError as e:
    raise ImportError("Brak biblioteki Pillow. Zainstaluj: pip install Pillow") from e

from ..constants import JPEG_QUALITY
from ..image import DecodedImage, Pixel


def to_pil(image: DecodedImage) -> "Image.Image":
    return Image.frombytes("RGB", image.size, image.to_rgb_bytes())


def from_pil(img: "Image.Image") -> DecodedImage:
    img = img.convert("RGB")
    w, h = img.size
    data = img.tobytes()
    it = iter(data)
    return DecodedImage(w, h, tuple(Pixel(r, g, b) for r, g, b in zip(it, it, it)))


def write_image(path, image: DecodedImage, quality: int = JPEG_QUALITY):
    """Zapis przez Pillow; format wynika z rozszerzenia pliku."""
    img = to_pil(image)
    suffix = Path(path).suffix.lower()
    if suffix in (".jpg", ".jpeg"):
        # subsampling=0 → najlepsza jakość, optimize=True → mniejsze pliki
        img.save(path, format="JPEG", quality=int(quality), optimize=True, subsampling=0)
    else:
        img.save(path)
