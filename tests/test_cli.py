import io

import pytest

from rgrka.cli import Cipher, main
from rgrka.code_word import process_text


@pytest.mark.parametrize(
    "name, expected",
    [
        ("wCODE", Cipher.WORD_CODE),
        ("POLIBIUS", Cipher.POLIBIUS),
        ("RSA", Cipher.RSA),
        ("rsa", Cipher.UNKNOWN),
        ("", Cipher.UNKNOWN),
    ],
)
def test_from_name(name, expected):
    assert Cipher.from_name(name) is expected


def test_unknown_cipher(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("AES\n"))
    assert main([]) == 1
    assert "Неизвестный алгоритм шифрования" in capsys.readouterr().err


def test_code_word_through_prompt(monkeypatch, capsys, tmp_path):
    target = tmp_path / "out.bin"
    monkeypatch.setattr("sys.stdin", io.StringIO(f"wCODE\n2\nhello\nkey\ny\n{target}\nn\n"))
    assert main([]) == 0
    assert target.read_bytes() == process_text("hello", "key")
    assert "Зашифрованный текст:" in capsys.readouterr().out


def test_cipher_given_as_argument(monkeypatch, tmp_path):
    source = tmp_path / "in.bin"
    encrypted = tmp_path / "enc.bin"
    decrypted = tmp_path / "dec.bin"
    source.write_bytes(b"argument mode")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n1\n{source}\n{encrypted}\n"))
    assert main(["POLIBIUS"]) == 0
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n2\n{encrypted}\n{decrypted}\n"))
    assert main(["POLIBIUS"]) == 0
    assert decrypted.read_bytes() == b"argument mode"


def test_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Ошибка: ")