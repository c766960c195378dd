import random

import pytest

from rgrka.rsa import (
    KeyPair,
    decrypt_file,
    decrypt_text,
    encrypt_file,
    encrypt_text,
    gcd,
    gen_keys,
    gen_prime,
    is_prime,
    mod_pow,
    read_private_key,
)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97, 1009, 7919])
def test_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [-3, 0, 1, 4, 9, 25, 49, 1001, 7917])
def test_non_primes(n):
    assert is_prime(n) is False


def test_gcd():
    assert gcd(48, 18) == 6
    assert gcd(17, 5) == 1
    assert gcd(7, 0) == 7


def test_mod_pow_worked_example():
    assert mod_pow(4, 13, 497) == 445


def test_mod_pow_zero_exponent():
    assert mod_pow(12, 0, 7) == 1


def test_mod_pow_rejects_zero_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_gen_prime_range_and_primality():
    rng = random.Random(1)
    for _ in range(20):
        p = gen_prime(rng)
        assert 1000 <= p <= 10000
        assert is_prime(p)


def test_gen_keys_round_trip_all_bytes():
    keys = gen_keys(random.Random(42))
    assert keys.e >= 65537
    data = bytes(range(256))
    assert decrypt_text(encrypt_text(data, keys.e, keys.n), keys.d, keys.n) == data


def test_gen_keys_is_deterministic_with_seed():
    first = gen_keys(random.Random(7))
    second = gen_keys(random.Random(7))
    assert (first.e, first.d, first.n) == (second.e, second.d, second.n)

    factors = [p for p in range(1000, 10001) if first.n % p == 0 and is_prime(p)]
    assert len(factors) == 2
    p, q = factors
    assert p * q == first.n
    assert (first.e * first.d) % ((p - 1) * (q - 1)) == 1
    assert mod_pow(mod_pow(65, first.e, first.n), first.d, first.n) == 65


def test_encrypt_text_format_identity_exponent():
    assert encrypt_text("AB", 1, 1000) == "65 66 "


def test_decrypt_text_identity_exponent():
    assert decrypt_text("65 66", 1, 1000) == b"AB"


def test_decrypt_text_stops_at_non_number():
    assert decrypt_text("72 105 x 33", 1, 1000) == b"Hi"


def test_decrypt_text_keeps_low_byte():
    assert decrypt_text("321", 1, 1000) == b"A"


def test_text_round_trip_unicode():
    keys = gen_keys(random.Random(3))
    text = "Секрет"
    encrypted = encrypt_text(text, keys.e, keys.n)
    assert decrypt_text(encrypted, keys.d, keys.n).decode("utf-8") == text


def test_file_round_trip(tmp_path):
    source = tmp_path / "plain.bin"
    encrypted = tmp_path / "cipher.txt"
    key_file = tmp_path / "keys.txt"
    decrypted = tmp_path / "back.bin"
    payload = b"file \x00\xff payload"
    source.write_bytes(payload)

    keys = encrypt_file(source, encrypted, key_file, random.Random(11))
    assert isinstance(keys, KeyPair)
    assert key_file.read_text() == f"{keys.e} {keys.n}\n{keys.d} {keys.n}"

    d, n = read_private_key(key_file)
    assert (d, n) == (keys.d, keys.n)
    decrypt_file(encrypted, decrypted, d, n)
    assert decrypted.read_bytes() == payload


def test_read_private_key_malformed(tmp_path):
    key_file = tmp_path / "keys.txt"
    key_file.write_text("65537 1234\n")
    with pytest.raises(ValueError):
        read_private_key(key_file)


def test_encrypt_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        encrypt_file(tmp_path / "nope", tmp_path / "out", tmp_path / "keys")