"""Interactive dialogues for the code-word, Polybius and RSA ciphers."""

from __future__ import annotations

import re
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

from rgrka import rsa
from rgrka.code_word import process_file, process_text
from rgrka.polibius import PolybiusSquare

_WORD_PATTERN = re.compile(r"\S+")
_INVALID_INPUT = "Некорректный ввод."
_CODE_WORD_PROMPT = "Введите кодовое слово: "
_WORD_FILE_SUFFIX = ".key"
_STORE_PAIR_PROMPT = "Введите путь к файлу для хранения ключей: "
_READ_PAIR_PROMPT = "Введите путь к файлу с ключами: "


class InputMode(Enum):
    """Whether the user works with a file or with typed text."""

    FILE = 1
    TEXT = 2
    UNKNOWN = 0


class Console:
    """Reads whitespace-separated words and whole lines from one input stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self._pending = ""

    def _fill(self) -> bool:
        line = self.stdin.readline()
        if not line:
            return False
        self._pending += line
        return True

    def _ask(self, text: str) -> None:
        if text:
            self.stdout.write(text)
            self.stdout.flush()

    def prompt(self, text: str = "") -> str:
        """Show ``text`` and return the next whitespace-separated word.

        The single character following the word (normally the newline)
        is consumed as well, so a following line read starts afresh.
        """
        self._ask(text)
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = ""
            if not self._fill():
                raise EOFError("Ввод закончился.")
        match = _WORD_PATTERN.match(stripped)
        rest = stripped[match.end():]
        self._pending = rest[1:]
        return match.group()

    def prompt_line(self, text: str = "") -> str:
        """Show ``text`` and return the rest of the current line."""
        self._ask(text)
        while "\n" not in self._pending:
            if not self._fill():
                if not self._pending:
                    raise EOFError("Ввод закончился.")
                line, self._pending = self._pending, ""
                return line
        line, _, self._pending = self._pending.partition("\n")
        return line


def _say(console: Console, text: str, end: str = "\n") -> None:
    print(text, end=end, file=console.stdout)


def _complain(console: Console, text: str) -> None:
    print(text, file=console.stderr)


def _display(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _to_int(word: str) -> int | None:
    try:
        return int(word)
    except ValueError:
        return None


def _is_yes(answer: str) -> bool:
    return answer[:1] in ("y", "Y")


def save_to_file(filename: str, content: str | bytes, console: Console) -> bool:
    """Write ``content`` to ``filename`` and report the outcome on the console."""
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    try:
        Path(filename).write_bytes(data)
    except OSError:
        _complain(console, "Ошибка при сохранении в файл.")
        return False
    _say(console, f"Текст сохранен в файл: {filename}")
    return True


def validate_command(value: int | None) -> int:
    """Accept only the menu choices 1 and 2."""
    if value not in (1, 2):
        raise ValueError(_INVALID_INPUT)
    return value


def get_input_mode(console: Console) -> InputMode:
    """Ask whether to work with a file or with text."""
    answer = _to_int(
        console.prompt("1. Работа с файлом\n2. Работа с текстом\nВыберите режим: ")
    )
    if answer == 1:
        return InputMode.FILE
    if answer == 2:
        return InputMode.TEXT
    return InputMode.UNKNOWN


def handle_polibius(console: Console) -> None:
    """Run the Polybius square dialogue."""
    cipher = PolybiusSquare()
    mode = get_input_mode(console)

    if mode is InputMode.FILE:
        command = _to_int(
            console.prompt("1. Шифрование\n2. Дешифрование\nВыберите режим: ")
        )
        inpath = console.prompt_line("Введите путь к исходному файлу: ")
        outpath = console.prompt_line("Введите путь к файлу для результата: ")
        try:
            if command == 1:
                cipher.encrypt_file(inpath, outpath)
                _say(console, "Шифрование завершено.", end="")
            elif command == 2:
                cipher.decrypt_file(inpath, outpath)
                _say(console, "Шифрование завершено.", end="")
            else:
                _say(console, "Неизвестная команда", end="")
        except (OSError, ValueError) as exc:
            _complain(console, f"Ошибка: {exc}")
    elif mode is InputMode.TEXT:
        text = console.prompt_line("Введите текст для шифрования: ")
        try:
            encrypted = cipher.encrypt_text(text)
            _say(console, f"Шифрование завершено: {_display(encrypted)}")
            if _is_yes(console.prompt("Сохранить в файл? (y/n)")):
                filename = console.prompt("Введите путь к файлу для результата: ")
                save_to_file(filename, encrypted, console)
                _say(console, "Сохранено.", end="")
        except ValueError as exc:
            _complain(console, f"Ошибка: {exc}")
    else:
        _say(console, _INVALID_INPUT, end="")


def handle_code_word(console: Console) -> None:
    """Run the code-word (repeating XOR) dialogue."""
    mode = get_input_mode(console)

    if mode is InputMode.FILE:
        command = _to_int(
            console.prompt("1. Шифровать файл\n2. Дешифровать файл\nВыберите действие: ")
        )
        input_path = console.prompt_line("Введите путь к файлу: ")
        output_path = console.prompt_line("Введите путь для сохранения: ")
        code_word = console.prompt_line(_CODE_WORD_PROMPT)
        try:
            process_file(input_path, output_path, code_word)
        except (OSError, ValueError) as exc:
            _complain(console, f"Ошибка: {exc}")
            _complain(console, "Ошибка: Не удалось обработать файл. Проверьте ввод.")
        else:
            _say(console, "Файл зашифрован!" if command == 1 else "Файл расшифрован!")
    elif mode is InputMode.TEXT:
        text = console.prompt_line("Введите текст: ")
        code_word = console.prompt_line(_CODE_WORD_PROMPT)
        try:
            result = process_text(text, code_word)
        except ValueError as exc:
            _complain(console, f"Ошибка: {exc}")
            return
        _say(console, f"Зашифрованный текст: {_display(result)}")
        _say(
            console,
            f"\nВАЖНО! Для дешифрования вам понадобится тот же ключ: {code_word}",
        )
        if _is_yes(console.prompt("Сохранить результат в файл? (y/n): ")):
            filename = console.prompt("Введите имя файла: ")
            save_to_file(filename, result, console)
            if _is_yes(console.prompt("Сохранить ключ в файл? (y/n): ")):
                word_file = filename + _WORD_FILE_SUFFIX
                save_to_file(word_file, code_word, console)
                _say(console, f"Ключ сохранен в файл: {word_file}")
    else:
        _say(console, "Некорректный выбор режима!")


def _rsa_file_mode(console: Console) -> None:
    command = _to_int(console.prompt("1. Шифрование\n2. Дешифрование\nВыберите режим: "))
    if command is None:
        raise ValueError(_INVALID_INPUT)
    validate_command(command)

    source = console.prompt_line("Введите путь к исходному файлу: ")
    target = console.prompt_line("Введите путь к файлу для результата: ")
    if command == 1:
        pair_path = console.prompt_line(_STORE_PAIR_PROMPT)
        rsa.encrypt_file(source, target, pair_path)
        _say(console, f"Щифрование завершено. Результат сохранен в {target}")
        _say(console, f"Ключи сохранены в {pair_path}")
    else:
        pair_path = console.prompt_line(_READ_PAIR_PROMPT)
        try:
            d, n = rsa.read_private_key(pair_path)
        except OSError:
            raise ValueError("Не удалось открыть файл с ключами.") from None
        rsa.decrypt_file(source, target, d, n)
        _say(console, f"Дешифрование завершено. Результат сохранен в {target}")


def _rsa_text_mode(console: Console) -> None:
    command = _to_int(
        console.prompt("1. Шифровать текст\n2. Дешифровать текст\nВыберите действие: ")
    )
    if command is None:
        raise ValueError("Ошибка: введено нечисловое значение!")
    validate_command(command)

    text = console.prompt_line("Введите текст: ")
    if command == 1:
        pair = rsa.gen_keys()
        encrypted = rsa.encrypt_text(text, pair.e, pair.n)
        _say(console, f"Открытый ключ (e, n): {pair.e}, {pair.n}")
        _say(console, f"Закрытый ключ (d, n): {pair.d}, {pair.n}")
        _say(console, f"Зашифрованный текст: {encrypted}")
    else:
        d = _to_int(console.prompt("Введите закрытый ключ d: "))
        n = _to_int(console.prompt("Введите модуль n: "))
        if d is None or n is None:
            raise ValueError("Ошибка: введено нечисловое значение!")
        decrypted = rsa.decrypt_text(text, d, n)
        _say(console, f"Расшифрованный текст: {_display(decrypted)}")


def handle_rsa(console: Console) -> None:
    """Run the RSA dialogue."""
    mode = get_input_mode(console)

    if mode is InputMode.FILE:
        try:
            _rsa_file_mode(console)
        except (OSError, ValueError) as exc:
            _complain(console, str(exc))
    elif mode is InputMode.TEXT:
        try:
            _rsa_text_mode(console)
        except ValueError as exc:
            _complain(console, f"ОШИБКА: {exc}")