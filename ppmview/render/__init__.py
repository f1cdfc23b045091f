from .photo import photo_from_image, row_hex

__all__ = ["photo_from_image", "row_hex"]
