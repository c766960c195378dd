"""Repeating-key XOR cipher keyed by a code word."""

from __future__ import annotations

from itertools import cycle
from pathlib import Path

_EMPTY_KEY = "Кодовое слово не может быть пустым!"
_EMPTY_PATH = "Пути к файлам не могут быть пустыми!"


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def xor_bytes(data: bytes | bytearray, key: str | bytes) -> bytes:
    """XOR ``data`` with ``key`` repeated over its whole length."""
    key_bytes = _as_bytes(key)
    if not key_bytes:
        raise ValueError(_EMPTY_KEY)
    return bytes(byte ^ k for byte, k in zip(data, cycle(key_bytes)))


def process_text(text: str | bytes, key: str | bytes) -> bytes:
    """Encrypt or decrypt ``text`` with the code word; the operation is its own inverse."""
    if not _as_bytes(key):
        raise ValueError(_EMPTY_KEY)
    return xor_bytes(_as_bytes(text), key)


def process_file(
    input_path: str | Path, output_path: str | Path, key: str | bytes
) -> int:
    """XOR the contents of ``input_path`` into ``output_path``; return the bytes written."""
    if not str(input_path) or not str(output_path):
        raise ValueError(_EMPTY_PATH)
    data = Path(input_path).read_bytes()
    result = xor_bytes(data, key)
    Path(output_path).write_bytes(result)
    return len(result)