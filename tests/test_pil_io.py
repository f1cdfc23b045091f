import pytest

from PIL import Image

from ppmview.image import placeholder_gradient
from ppmview.io import decode
from ppmview.io.pil_io import from_pil, to_pil, write_image


def test_to_pil(two_px):
    img = to_pil(two_px)
    assert img.size == (2, 1)
    assert img.getpixel((0, 0)) == (255, 0, 0)
    assert img.getpixel((1, 0)) == (0, 255, 0)


def test_pillow_p6_decodes_identically(tmp_path):
    ref = Image.new("RGB", (5, 3))
    ref.putdata([(x * 40, y * 80, (x + y) * 20) for y in range(3) for x in range(5)])
    path = tmp_path / "ref.ppm"
    ref.save(path)
    assert decode(path) == from_pil(ref)


def test_write_png(tmp_path):
    src = placeholder_gradient(8, 4)
    out = tmp_path / "out.png"
    write_image(out, src)
    with Image.open(out) as img:
        assert from_pil(img) == src


def test_write_jpeg(tmp_path):
    out = tmp_path / "out.jpg"
    write_image(out, placeholder_gradient(8, 8), quality=80)
    with Image.open(out) as img:
        assert img.format == "JPEG"
        assert img.size == (8, 8)


def test_write_unknown_extension(tmp_path, two_px):
    with pytest.raises(ValueError):
        write_image(tmp_path / "out.nope", two_px)
