"""Code-word XOR, Polybius square and toy RSA ciphers with an interactive console."""

__version__ = "0.1.0"
__all__ = ["code_word", "polibius", "rsa", "modes", "cli"]