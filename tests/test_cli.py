import pytest

from ppmview.cli import build_parser, main

PLAIN = b"P3\n2 1\n255\n255 0 0  0 255 0\n"


def test_info(write_file, capsys):
    p = write_file("a.ppm", PLAIN)
    assert main([str(p), "--info"]) == 0
    assert capsys.readouterr().out.strip() == "P3 2x1 maxval=255"


def test_info_bad_file(write_file, caplog):
    p = write_file("bad.ppm", b"P5\n1 1\n255\n")
    assert main([str(p), "--info"]) == 1
    assert "not a recognized PPM magic" in caplog.text


def test_export(write_file, tmp_path):
    p = write_file("a.ppm", PLAIN)
    out = tmp_path / "a.png"
    assert main([str(p), "--export", str(out)]) == 0
    assert out.exists()


def test_export_truncated(write_file, tmp_path):
    p = write_file("t.ppm", b"P6\n1 1\n255\n\x01")
    assert main([str(p), "--export", str(tmp_path / "x.png")]) == 1
    assert not (tmp_path / "x.png").exists()


def test_info_requires_path():
    with pytest.raises(SystemExit):
        main(["--info"])


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.path is None
    assert args.quality == 90
    assert args.verbose == 0
