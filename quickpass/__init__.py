"""
QuickPass: configurable random password generator with a strength meter.
"""

from .config import Configuration
from .generator import build_pool, generate, sample_password
from .strength import StrengthResult, score_strength

__all__ = [
    "Configuration",
    "StrengthResult",
    "build_pool",
    "sample_password",
    "generate",
    "score_strength",
]
