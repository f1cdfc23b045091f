# ppmview/io/errors.py
import re
from typing import Optional

_INT_RE = re.compile(rb"[+-]?[0-9]+")

# dłuższe liczby to na pewno uszkodzony plik
MAX_DIGITS = 20


class FormatError(ValueError):
    """
    Jedyny rodzaj błędu dekodera. `reason` to kategoria (np. "truncated pixel data"),
    `detail` mówi, który token zawiódł, `offset` to przybliżona pozycja w strumieniu.
    `sample` (opcjonalnie) – początek pliku jako tekst, wyłącznie do diagnostyki.
    """

    def __init__(
        self,
        reason: str,
        detail: Optional[str] = None,
        offset: Optional[int] = None,
        sample: Optional[str] = None,
    ):
        self.reason = reason
        self.detail = detail
        self.offset = offset
        self.sample = sample
        super().__init__(self._render())

    def _render(self) -> str:
        msg = self.reason
        if self.detail:
            msg += f": {self.detail}"
        if self.offset is not None:
            msg += f" (at byte {self.offset})"
        return msg


def show_token(tok: Optional[bytes]) -> str:
    if tok is None:
        return "<end of input>"
    return repr(tok.decode("utf-8", errors="replace"))


def _strip_tail(tok: bytes) -> bytes:
    # twarda spacja UTF-8 albo bajty <= 0x20 na końcu tokenu
    end = len(tok)
    while end:
        if tok[end - 1] == 0xA0 and end >= 2 and tok[end - 2] == 0xC2:
            end -= 2
        elif tok[end - 1] <= 0x20:
            end -= 1
        else:
            break
    return tok[:end]


def parse_int(tok: Optional[bytes], reason: str, what: str, offset: Optional[int] = None) -> int:
    """Token -> int albo FormatError(reason). Cały token musi być liczbą całkowitą."""
    digits = _strip_tail(tok) if tok is not None else None
    if digits is None or not _INT_RE.fullmatch(digits):
        raise FormatError(reason, f"{what} {show_token(tok)}", offset)
    ndigits = len(digits.lstrip(b"+-"))
    if ndigits > MAX_DIGITS:
        raise FormatError(reason, f"{what} has {ndigits} digits", offset)
    return int(digits)
