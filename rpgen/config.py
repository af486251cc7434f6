"""
Configuration for the Random Password Generator.
"""

from dataclasses import dataclass


# Character sets, concatenated in this order to form the alphabet.
LETTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+~[]{}|;:,.<>?"

# Bounds of the length slider.
MIN_LENGTH = 6
MAX_LENGTH = 100

# How long the copy button shows "Copied!" before reverting.
COPY_RESET_MS = 2000


@dataclass
class PasswordConfig:
    # Desired password length in characters.
    # NOTE: not validated here; input surfaces clamp with clamp_length().
    length: int = 8

    # Extend the alphabet with DIGITS.
    include_digits: bool = False

    # Extend the alphabet with SYMBOLS.
    include_symbols: bool = False


def clamp_length(value: int) -> int:
    """
    Force a user-supplied length into [MIN_LENGTH, MAX_LENGTH].
    """
    return max(MIN_LENGTH, min(int(value), MAX_LENGTH))


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
