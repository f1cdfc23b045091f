from .image import DecodedImage, Pixel, placeholder_gradient, to_bgrx
from .io import FormatError, decode, encode_p3, encode_p6, read_header

__all__ = [
    "DecodedImage",
    "Pixel",
    "FormatError",
    "decode",
    "read_header",
    "encode_p3",
    "encode_p6",
    "placeholder_gradient",
    "to_bgrx",
]
