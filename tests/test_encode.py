import pytest

from ppmview.image import DecodedImage, Pixel, placeholder_gradient
from ppmview.io import decode, encode_p3, encode_p6


def test_encode_p3_layout(two_px):
    assert encode_p3(two_px) == b"P3\n2 1\n255\n255 0 0 0 255 0\n"


def test_encode_p3_comment(two_px):
    data = encode_p3(two_px, comment="made by ppmview")
    assert data.startswith(b"P3\n# made by ppmview\n2 1\n")
    assert decode(data) == two_px


def test_p3_round_trip():
    img = placeholder_gradient(17, 9)
    assert decode(encode_p3(img)) == img


def test_p6_round_trip():
    img = placeholder_gradient(13, 5)
    assert decode(encode_p6(img)) == img


def test_encode_p3_other_maxval():
    img = DecodedImage(1, 1, (Pixel(255, 0, 128),))
    data = encode_p3(img, maxval=15)
    assert data.splitlines()[2] == b"15"
    assert decode(data).pixels[0] == (255, 0, 136)


def test_encode_p3_rejects_bad_maxval(two_px):
    with pytest.raises(ValueError):
        encode_p3(two_px, maxval=0)
