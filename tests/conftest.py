import pytest

from ppmview.image import DecodedImage, Pixel


@pytest.fixture
def two_px():
    return DecodedImage(2, 1, (Pixel(255, 0, 0), Pixel(0, 255, 0)))


@pytest.fixture
def write_file(tmp_path):
    def _write(name, data: bytes):
        p = tmp_path / name
        p.write_bytes(data)
        return p

    return _write
