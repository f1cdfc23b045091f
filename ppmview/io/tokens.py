# ppmview/io/tokens.py
from typing import Optional

WHITESPACE = b" \t\n\v\f\r"
EOL = b"\n\r"

UTF8_BOM = b"\xef\xbb\xbf"
UTF8_NBSP = b"\xc2\xa0"


def normalize_token(tok: bytes) -> bytes:
    """
    Usuwa z początku tokenu (aż do stabilnej postaci): BOM UTF-8, twardą spację
    UTF-8 (C2 A0) oraz pojedyncze bajty <= 0x20.
    """
    i, n = 0, len(tok)
    while i < n:
        if tok.startswith(UTF8_BOM, i):
            i += 3
        elif tok.startswith(UTF8_NBSP, i):
            i += 2
        elif tok[i] <= 0x20:
            i += 1
        else:
            break
    return tok[i:]


class TokenSource:
    """
    Wspólny interfejs czytnika tokenów nad buforem bajtów.
    `next_token()` zwraca znormalizowany token albo None na końcu danych;
    `read_separator()` / `read_bytes()` czytają surowe bajty (ciało P6).
    """

    # czy po nagłówku można czytać dane binarne (nie dla tekstu z UTF-16)
    binary_safe = True

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0
        self.offset = 0  # początek ostatnio zwróconego tokenu

    def _raw_token(self) -> Optional[bytes]:
        raise NotImplementedError

    def next_token(self) -> Optional[bytes]:
        while True:
            tok = self._raw_token()
            if tok is None:
                return None
            tok = normalize_token(tok)
            if tok:
                return tok

    def _skip_line(self):
        data, i, n = self.data, self.pos, len(self.data)
        while i < n and data[i] not in EOL:
            i += 1
        self.pos = i

    def read_separator(self) -> Optional[int]:
        if self.pos >= len(self.data):
            return None
        b = self.data[self.pos]
        self.pos += 1
        return b

    def read_bytes(self, n: int) -> bytes:
        chunk = self.data[self.pos : self.pos + n]
        self.pos += len(chunk)
        return chunk


class TextTokenSource(TokenSource):
    """
    Tekst (UTF-8 po ewentualnej transkodacji): tokeny rozdzielone białymi znakami,
    token zaczynający się od '#' wycina resztę linii.
    """

    def __init__(self, data: bytes, binary_safe: bool = True):
        super().__init__(data)
        self.binary_safe = binary_safe

    def _raw_token(self) -> Optional[bytes]:
        data, n = self.data, len(self.data)
        while True:
            i = self.pos
            while i < n and data[i] in WHITESPACE:
                i += 1
            if i >= n:
                self.pos = n
                return None
            start = i
            while i < n and data[i] not in WHITESPACE:
                i += 1
            self.pos = i
            tok = data[start:i]
            if normalize_token(tok).startswith(b"#"):
                # komentarz do końca linii
                self._skip_line()
                continue
            self.offset = start
            return tok


class RawByteSource(TokenSource):
    """
    Surowe bajty: białe znaki i komentarze pomijane bajt po bajcie,
    '#' kończy token i otwiera komentarz.
    """

    def _raw_token(self) -> Optional[bytes]:
        data, n = self.data, len(self.data)
        i = self.pos
        while i < n:
            b = data[i]
            if b in WHITESPACE:
                i += 1
            elif b == 35:  # '#'
                self.pos = i
                self._skip_line()
                i = self.pos
            else:
                break
        if i >= n:
            self.pos = n
            return None
        start = i
        while i < n and data[i] not in WHITESPACE and data[i] != 35:
            i += 1
        self.pos = i
        self.offset = start
        return data[start:i]
