"""
Random Password Generator package.
"""

from .config import PasswordConfig, DEFAULT_CONFIG, clamp_length
from .generator import generate_password, generate_password_with_meta

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "clamp_length",
    "generate_password",
    "generate_password_with_meta",
]
