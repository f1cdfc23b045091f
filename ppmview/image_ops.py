# ppmview/image_ops.py
from typing import List


def clamp(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def scale_channel(v: int, maxval: int) -> int:
    """Przeskalowanie kanału z zakresu 0..maxval do 0..255 (floor) z obcięciem."""
    if maxval != 255 and maxval > 0:
        v = (v * 255) // maxval
    return clamp(v)


def scale_table(maxval: int) -> List[int]:
    """Tablica 256 wartości dla danych binarnych (bajt -> kanał 0..255)."""
    return [scale_channel(v, maxval) for v in range(256)]
