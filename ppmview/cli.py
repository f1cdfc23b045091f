# ppmview/cli.py
import argparse
import logging
import sys
from typing import List, Optional

from .constants import JPEG_QUALITY
from .image import placeholder_gradient
from .io import FormatError, decode_with_header, read_header

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="ppmview", description="Podgląd plików PPM (P3/P6).")
    ap.add_argument("path", nargs="?", help="plik PPM do wczytania")
    ap.add_argument("--info", action="store_true", help="wypisz nagłówek i zakończ")
    ap.add_argument("--export", metavar="OUT", help="zapisz obraz przez Pillow (PNG/JPEG/...)")
    ap.add_argument("--quality", type=int, default=JPEG_QUALITY, help="jakość JPEG (1-100)")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def _setup_logging(verbose: int):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_info(path: str) -> int:
    try:
        hdr = read_header(path)
    except FormatError as e:
        log.error("%s: %s", path, e)
        return 1
    print(f"{hdr.magic} {hdr.width}x{hdr.height} maxval={hdr.maxval}")
    return 0


def run_export(path: str, out: str, quality: int) -> int:
    from .io.pil_io import write_image

    try:
        image, hdr = decode_with_header(path)
    except FormatError as e:
        log.error("%s: %s", path, e)
        return 1
    log.info("%s image loaded: %dx%d", hdr.magic, image.width, image.height)
    try:
        write_image(out, image, quality=quality)
    except (OSError, ValueError) as e:
        log.error("Nie udało się zapisać %s: %s", out, e)
        return 1
    return 0


def run_viewer(path: Optional[str]) -> int:
    from .app import ViewerApp

    image = None
    src = None
    if path:
        try:
            image, hdr = decode_with_header(path)
            src = path
            log.info("%s image loaded: %dx%d", hdr.magic, image.width, image.height)
        except FormatError as e:
            log.warning("%s: %s – używam obrazu zastępczego", path, e)
    if image is None:
        image = placeholder_gradient()
    app = ViewerApp(image, src=src)
    app.mainloop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _setup_logging(args.verbose)

    if args.info or args.export:
        if not args.path:
            ap.error("--info/--export wymaga ścieżki do pliku")
        if args.info:
            return run_info(args.path)
        return run_export(args.path, args.export, args.quality)
    return run_viewer(args.path)


if __name__ == "__main__":
    sys.exit(main())
