"""
Mapping logic: derive the alphabet a password is sampled from.
"""

from __future__ import annotations

from .config import PasswordConfig, DEFAULT_CONFIG, LETTERS, DIGITS, SYMBOLS


def build_alphabet(config: PasswordConfig | None = None) -> str:
    """
    Concatenate the character sets enabled by the configuration.

    Letters are always present, so the result is never empty.
    Digits come before symbols and nothing is deduplicated.
    """
    cfg = config or DEFAULT_CONFIG

    alphabet = LETTERS
    if cfg.include_digits:
        alphabet += DIGITS
    if cfg.include_symbols:
        alphabet += SYMBOLS
    return alphabet
