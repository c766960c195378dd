# rgrka

A small interactive console program and library with three classic ciphers:

- **Code word**: XOR of the data with a repeating key.
- **Polybius square**: every byte becomes a pair of bytes, its row and column in a 16×16 square.
- **RSA**: a toy RSA with primes from 1000 to 10000, applied byte by byte. It is for study and gives no real security.

The prompts and messages of the console program are in Russian.

## Installation

```
pip install .
```

## Command line

```
rgrka
rgrka RSA
```

The program asks which cipher to use: `wCODE`, `POLIBIUS` or `RSA`. You can also give the name as the only argument. It then asks whether to work with a file (1) or with text typed at the prompt (2), and asks for the rest step by step. If the cipher name is unknown, or input ends early, the program exits with status 1.

- **wCODE**: encrypts or decrypts a file or a line of text with a code word. After text mode you can save the result to a file. You can also save the code word to a file of the same name with `.key` appended.
- **POLIBIUS**: encrypts or decrypts a file, or encrypts a line of text. The text result can be saved to a file.
- **RSA**: in file mode, encryption makes fresh keys and writes them to a file you name. The first line holds `e n` and the second holds `d n`. To decrypt, give that same file. In text mode, encryption prints the public and private keys and the numbers. Decryption asks for `d` and `n`.

## Library use

```python
from rgrka.code_word import process_text, process_file
from rgrka.polibius import PolybiusSquare
from rgrka import rsa

hidden = process_text("hello", "key")           # bytes
assert process_text(hidden, "key") == b"hello"

square = PolybiusSquare()
pairs = square.encrypt_text("abc")              # b"\x06\x01\x06\x02\x06\x03"
assert square.decrypt_text(pairs) == b"abc"

keys = rsa.gen_keys()                           # KeyPair(e, d, n)
numbers = rsa.encrypt_text("hi", keys.e, keys.n)
assert rsa.decrypt_text(numbers, keys.d, keys.n) == b"hi"
```

### `rgrka.code_word`

- `xor_bytes(data, key)` XORs the data with the key repeated over its length.
- `process_text(text, key)` does the same for text. `str` is taken as UTF-8 and the result is `bytes`. Applying it twice with the same key gives back the input.
- `process_file(input_path, output_path, key)` XORs one file into another and returns the number of bytes written.

An empty code word or an empty path raises `ValueError`. File errors raise `OSError`.

### `rgrka.polibius`

`PolybiusSquare` has `encrypt_text`, `decrypt_text`, `encrypt_file` and `decrypt_file`.

- Decryption ignores a trailing odd byte.
- A coordinate of 16 or more raises `ValueError`.
- The file methods raise `OSError` when a file cannot be read or written.

### `rgrka.rsa`

- `is_prime`, `gcd` and `mod_pow` are the number helpers.
- `gen_prime(rng=None)` returns a random prime between 1000 and 10000.
- `gen_keys(rng=None)` returns a `KeyPair`. The public exponent starts at 65537.
- `encrypt_text` writes one decimal number per input byte, each followed by a space.
- `decrypt_text` reads the numbers back and returns `bytes`. It keeps the low 8 bits of each result.
- `encrypt_file(input_file, output_file, key_file, rng=None)` encrypts with fresh keys, writes the key file and returns the `KeyPair`.
- `decrypt_file(input_file, output_file, d, n)` decrypts a file of numbers.
- `read_private_key(key_file)` returns `(d, n)` from the second line of a key file.

You can pass a seeded `random.Random` as `rng` to make key generation repeatable.

### `rgrka.modes` and `rgrka.cli`

- `Console` reads words and lines from any text streams.
- `handle_code_word`, `handle_polibius` and `handle_rsa` run the dialogues on a `Console`.
- `rgrka.cli.main(argv=None)` is the command's entry point. It returns the exit status.

## Tests

```
pip install .[test]
pytest
```