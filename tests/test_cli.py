"""Tests for the finslink command line."""
from finslink.cli import main


def test_connect(capsys):
    assert main(["connect"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("46 49 4e 53 00 00 00 0c")
    assert out.endswith("(length: 20)")


def test_read_accepts_hex_literals(capsys):
    assert main(["--raw", "read", "0x82", "100", "1"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith("0101820064000001")


def test_write_bcd(capsys):
    assert main(["--raw", "write", "0x82", "0", "1234", "--encoding", "bcd"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith("01028200000000011234")


def test_validation_error_exit_code(capsys):
    assert main(["write", "0x82", "0", "10000", "--encoding", "bcd"]) == 2
    assert "error:" in capsys.readouterr().err


def test_permissive_flag(capsys):
    assert main(["--permissive", "--raw", "read", "0x82", "0x10064", "1"]) == 0
    assert capsys.readouterr().out.strip().endswith("820064000001")
