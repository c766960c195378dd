"""Polybius square over all 256 byte values (16 x 16)."""

from __future__ import annotations

from pathlib import Path

_SIDE = 16


class PolybiusSquare:
    """Maps each byte to its (row, column) pair in a 16 x 16 square and back."""

    def __init__(self) -> None:
        self._square = [bytes(range(row * _SIDE, (row + 1) * _SIDE)) for row in range(_SIDE)]
        self._position = {
            value: (row, col)
            for row, line in enumerate(self._square)
            for col, value in enumerate(line)
        }

    def _encode(self, data: bytes) -> bytes:
        out = bytearray()
        for byte in data:
            try:
                out.extend(self._position[byte])
            except KeyError:
                raise ValueError("Символ не найден в квадрате Полибия") from None
        return bytes(out)

    def _decode(self, data: bytes) -> bytes:
        out = bytearray()
        pairs = iter(data)
        for row, col in zip(pairs, pairs):
            if row >= _SIDE or col >= _SIDE:
                raise ValueError(f"Недопустимые координаты: ({row}, {col})")
            out.append(self._square[row][col])
        return bytes(out)

    def encrypt_text(self, text: str | bytes) -> bytes:
        """Return two coordinate bytes for every byte of ``text``."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        return self._encode(data)

    def decrypt_text(self, text: bytes) -> bytes:
        """Turn coordinate pairs back into bytes; a trailing odd byte is ignored."""
        data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
        return self._decode(data)

    def encrypt_file(self, inpath: str | Path, outpath: str | Path) -> None:
        """Encrypt the file at ``inpath`` into ``outpath``."""
        data = Path(inpath).read_bytes()
        Path(outpath).write_bytes(self._encode(data))

    def decrypt_file(self, inpath: str | Path, outpath: str | Path) -> None:
        """Decrypt the file at ``inpath`` into ``outpath``."""
        data = Path(inpath).read_bytes()
        Path(outpath).write_bytes(self._decode(data))