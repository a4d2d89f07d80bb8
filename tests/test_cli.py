import pytest

from bvernam.cipher import encrypt
from bvernam.cli import main


@pytest.mark.parametrize("argv", [[], ["a"], ["a", "b"], ["a", "b", "c", "d"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "Error: Incorrect number of parameters!" in capsys.readouterr().err


def test_encrypts_file(tmp_path):
    key_path = tmp_path / "key"
    in_path = tmp_path / "in"
    out_path = tmp_path / "out"
    key_path.write_bytes(b"secret")
    data = b"The quick brown fox jumps over the lazy dog"
    in_path.write_bytes(data)
    assert main([str(key_path), str(in_path), str(out_path)]) == 0
    assert out_path.read_bytes() == encrypt(data, b"secret")


def test_decrypts_back(tmp_path):
    key_path = tmp_path / "key"
    in_path = tmp_path / "in"
    mid_path = tmp_path / "mid"
    out_path = tmp_path / "out"
    key_path.write_bytes(b"token")
    data = bytes(range(100))
    in_path.write_bytes(data)
    assert main([str(key_path), str(in_path), str(mid_path)]) == 0
    assert main([str(key_path), str(mid_path), str(out_path)]) == 0
    assert out_path.read_bytes() == data


def test_empty_key_writes_empty_output(tmp_path):
    key_path = tmp_path / "key"
    in_path = tmp_path / "in"
    out_path = tmp_path / "out"
    key_path.write_bytes(b"")
    in_path.write_bytes(b"content")
    assert main([str(key_path), str(in_path), str(out_path)]) == 0
    assert out_path.read_bytes() == b""


def test_missing_input_fails(tmp_path, capsys):
    key_path = tmp_path / "key"
    key_path.write_bytes(b"secret")
    status = main([str(key_path), str(tmp_path / "missing"), str(tmp_path / "out")])
    assert status == 1
    assert capsys.readouterr().err.startswith("Error")