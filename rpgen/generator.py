"""
Password generator: sample characters from the configured alphabet.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from .config import PasswordConfig, DEFAULT_CONFIG
from .mapping import build_alphabet

logger = logging.getLogger(__name__)


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Characters the password was drawn from
    alphabet: str

    # Snapshot of the configuration used
    config: PasswordConfig


def generate_password_with_meta(
    config: PasswordConfig | None = None,
    rng: random.Random | None = None,
) -> GenerationMeta:
    """
    Generation pipeline with metadata:

    - Build the alphabet from the configuration.
    - Draw `length` indices uniformly over [0, len(alphabet)).
    - Join the selected characters.
    """
    cfg = config or DEFAULT_CONFIG
    source = rng or random

    alphabet = build_alphabet(cfg)
    size = len(alphabet)

    password = "".join(
        alphabet[source.randrange(size)] for _ in range(cfg.length)
    )

    logger.debug(
        "Generated password of length %d from %d-character alphabet",
        len(password),
        size,
    )

    return GenerationMeta(
        password=password,
        alphabet=alphabet,
        config=replace(cfg),
    )


def generate_password(
    config: PasswordConfig | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    High-level function: return only the password string.
    """
    meta = generate_password_with_meta(config, rng)
    return meta.password
