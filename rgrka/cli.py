"""Command-line entry point: choose a cipher and run its dialogue."""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from rgrka.modes import Console, handle_code_word, handle_polibius, handle_rsa


class Cipher(Enum):
    """The ciphers offered by the program."""

    WORD_CODE = "wCODE"
    POLIBIUS = "POLIBIUS"
    RSA = "RSA"
    UNKNOWN = ""

    @classmethod
    def from_name(cls, name: str) -> "Cipher":
        """Look a cipher up by its exact name; anything else is UNKNOWN."""
        for cipher in cls:
            if cipher is not cls.UNKNOWN and cipher.value == name:
                return cipher
        return cls.UNKNOWN


_HANDLERS = {
    Cipher.WORD_CODE: handle_code_word,
    Cipher.POLIBIUS: handle_polibius,
    Cipher.RSA: handle_rsa,
}


def main(argv: list[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="rgrka", description="Шифрование кодовым словом, квадратом Полибия и RSA."
    )
    parser.add_argument(
        "cipher", nargs="?", help="алгоритм шифрования: wCODE, POLIBIUS или RSA"
    )
    args = parser.parse_args(argv)
    console = Console()

    try:
        name = args.cipher
        if name is None:
            name = console.prompt("Выберите алгоритм шифрования(wCODE, POLIBIUS, RSA): ")
        handler = _HANDLERS.get(Cipher.from_name(name))
        if handler is None:
            print("Неизвестный алгоритм шифрования", file=console.stderr)
            return 1
        handler(console)
    except EOFError as exc:
        print(f"Ошибка: {exc}", file=console.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())