"""
quickpass.generator
Pool construction and password sampling.

The default random source is the non-cryptographic ``random`` module. Pass
``rng=random.SystemRandom()`` when a CSPRNG is required.
"""

import random
import string
from typing import Optional

from .config import Configuration


LETTERS = string.ascii_uppercase + string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-/{}[]?~"


def build_pool(include_numbers: bool, include_symbols: bool) -> str:
    """
    Concatenate the enabled character classes in fixed order:
    letters (always), then digits, then symbols.
    """
    pool = LETTERS
    if include_numbers:
        pool += NUMBERS
    if include_symbols:
        pool += SYMBOLS
    return pool


def sample_password(pool: str, length: int, rng: Optional[random.Random] = None) -> str:
    """
    Draw ``length`` characters from ``pool`` uniformly and independently (with replacement).
    An empty pool yields an empty password.
    """
    if not pool:
        return ""
    # any object with randrange(n) will do
    rng = rng or random
    n = len(pool)
    return "".join(pool[rng.randrange(n)] for _ in range(length))


def generate(config: Configuration, rng: Optional[random.Random] = None) -> str:
    pool = build_pool(config.include_numbers, config.include_symbols)
    return sample_password(pool, config.length, rng)
