"""Textbook RSA with small primes, applied byte by byte."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from pathlib import Path

PRIME_LOW = 1000
PRIME_HIGH = 10000
DEFAULT_EXPONENT = 65537

_LEADING_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class KeyPair:
    """Public exponent ``e``, private exponent ``d`` and modulus ``n``."""

    e: int
    d: int
    n: int


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def gen_prime(rng: random.Random | None = None) -> int:
    """Return a random prime between 1000 and 10000 inclusive."""
    rng = rng or random.SystemRandom()
    while True:
        candidate = rng.randint(PRIME_LOW, PRIME_HIGH)
        if is_prime(candidate):
            return candidate


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Compute ``base ** exp % mod``."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    return pow(base, exp, mod)


def gen_keys(rng: random.Random | None = None) -> KeyPair:
    """Generate a key pair from two distinct random primes."""
    rng = rng or random.SystemRandom()
    p = gen_prime(rng)
    q = gen_prime(rng)
    while q == p:
        q = gen_prime(rng)
    n = p * q
    phi = (p - 1) * (q - 1)
    e = DEFAULT_EXPONENT
    while gcd(e, phi) != 1:
        e += 1
    d = pow(e, -1, phi)
    return KeyPair(e=e, d=d, n=n)


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def _numbers(text: str):
    """Yield the leading unsigned integers of ``text``, stopping at the first non-number."""
    for token in text.split():
        match = _LEADING_DIGITS.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def encrypt_text(text: str | bytes, e: int, n: int) -> str:
    """Encrypt every byte of ``text``; each number is followed by a space."""
    return "".join(f"{mod_pow(byte, e, n)} " for byte in _as_bytes(text))


def decrypt_text(text: str, d: int, n: int) -> bytes:
    """Decrypt space-separated numbers into bytes (low 8 bits of each result)."""
    return bytes(mod_pow(number, d, n) & 0xFF for number in _numbers(text))


def encrypt_file(
    input_file: str | Path,
    output_file: str | Path,
    key_file: str | Path,
    rng: random.Random | None = None,
) -> KeyPair:
    """Encrypt a file with fresh keys, storing "e n" and "d n" lines in ``key_file``."""
    data = Path(input_file).read_bytes()
    keys = gen_keys(rng)
    Path(output_file).write_text(encrypt_text(data, keys.e, keys.n), encoding="ascii")
    Path(key_file).write_text(f"{keys.e} {keys.n}\n{keys.d} {keys.n}", encoding="ascii")
    return keys


def decrypt_file(input_file: str | Path, output_file: str | Path, d: int, n: int) -> None:
    """Decrypt a file of space-separated numbers into raw bytes."""
    text = Path(input_file).read_bytes().decode("latin-1")
    Path(output_file).write_bytes(decrypt_text(text, d, n))


def read_private_key(key_file: str | Path) -> tuple[int, int]:
    """Read ``(d, n)`` from the second line of a key file written by ``encrypt_file``."""
    lines = Path(key_file).read_text(encoding="utf-8").splitlines()
    rest = " ".join(lines[1:])
    numbers = list(_numbers(rest))
    if len(numbers) < 2:
        raise ValueError("Не удалось прочитать закрытый ключ.")
    return numbers[0], numbers[1]