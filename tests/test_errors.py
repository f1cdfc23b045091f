import pytest

from ppmview.io.errors import FormatError, parse_int


@pytest.mark.parametrize("tok,val", [(b"0", 0), (b"255", 255), (b"-7", -7), (b"+12", 12)])
def test_parse_int_ok(tok, val):
    assert parse_int(tok, "invalid pixel value", "r") == val


@pytest.mark.parametrize("tok", [b"", b"abc", b"12abc", b"1.5", None])
def test_parse_int_rejects(tok):
    with pytest.raises(FormatError) as ei:
        parse_int(tok, "invalid pixel value", "pixel 0 (r)", 42)
    err = ei.value
    assert err.reason == "invalid pixel value"
    assert err.offset == 42
    assert "pixel 0 (r)" in str(err)


def test_format_error_is_value_error():
    err = FormatError("truncated pixel data")
    assert isinstance(err, ValueError)
    assert str(err) == "truncated pixel data"


def test_format_error_render():
    err = FormatError("malformed header token", "width 'x'", 3)
    assert str(err) == "malformed header token: width 'x' (at byte 3)"


def test_parse_int_huge_token_is_format_error():
    with pytest.raises(FormatError) as ei:
        parse_int(b"9" * 5000, "invalid pixel value", "pixel 0 (r)")
    assert ei.value.reason == "invalid pixel value"
    assert "5000 digits" in str(ei.value)


@pytest.mark.parametrize("tok", [b"255\xc2\xa0", b"255\x00", b"255\xc2\xa0\x01\xc2\xa0"])
def test_parse_int_ignores_trailing_separators(tok):
    assert parse_int(tok, "invalid pixel value", "r") == 255


def test_parse_int_stray_nbsp_byte_still_rejected():
    with pytest.raises(FormatError):
        parse_int(b"255\xa0", "invalid pixel value", "r")


def test_parse_int_accepts_twenty_digits():
    assert parse_int(b"9" * 20, "malformed header token", "width") == 10**20 - 1
