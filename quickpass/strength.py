"""
quickpass.strength
Five-point strength heuristic derived from the generator configuration.

Only the configuration is scored, not the sampled password: a password
generated with numbers enabled counts as having variety even if no digit
was drawn.
"""

import math
from dataclasses import dataclass

MAX_SCORE = 5

LABEL_STRONG = "Strong"
LABEL_MEDIUM = "Medium"
LABEL_WEAK = "Weak"
LABEL_VERY_WEAK = "Very Weak"


@dataclass(frozen=True)
class StrengthResult:
    percent: int
    label: str


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_strength(length: int, include_numbers: bool, include_symbols: bool) -> StrengthResult:
    """
    Score a configuration on a 0-5 scale and map it to a percentage and label.
    """
    score = 0

    # --- Length (independent thresholds) ---
    if length >= 8:
        score += 1
    if length >= 12:
        score += 1
    if length >= 16:
        score += 1

    # --- Character variety ---
    score += sum(1 for enabled in (include_numbers, include_symbols) if enabled)

    percent = min(100, _round_half_up(score / MAX_SCORE * 100))

    # --- Strength label ---
    if percent >= 80:
        label = LABEL_STRONG
    elif percent >= 50:
        label = LABEL_MEDIUM
    elif percent >= 30:
        label = LABEL_WEAK
    else:
        label = LABEL_VERY_WEAK

    return StrengthResult(percent=percent, label=label)
