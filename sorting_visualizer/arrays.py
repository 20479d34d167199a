"""Building input arrays: random ones for demos, or parsed from user text."""

from __future__ import annotations

import random
import re

from sorting_visualizer.elements import Element, make_elements

_SEPARATORS = re.compile(r"[,\s]+")


def generate_random_array(size, low=10, high=310, rng=None) -> list[Element]:
    rng = rng or random.Random()
    return make_elements(rng.randint(low, high) for _ in range(size))


def parse_custom_array(text, max_value=500, max_count=100) -> list[int]:
    """
    Pull the usable numbers out of free text separated by commas or spaces.
    Tokens that are not integers in 1..max_value are dropped.
    """
    values = []
    for token in _SEPARATORS.split(text.strip()):
        try:
            value = int(token)
        except ValueError:
            continue
        if 0 < value <= max_value:
            values.append(value)
    return values[:max_count]


def validate_array_input(text, max_value=500, max_count=100):
    """Return (ok, error_message); error_message is None when ok."""
    if not text.strip():
        return False, "Please enter some numbers"
    values = parse_custom_array(text, max_value, max_count)
    if not values:
        return False, f"Please enter valid numbers (1-{max_value})"
    if len(values) < 2:
        return False, "Please enter at least 2 numbers"
    return True, None


def rejected_tokens(text, max_value=500) -> list[str]:
    """Tokens parse_custom_array would drop: not an integer, or outside 1..max_value."""
    rejected = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        try:
            value = int(token)
        except ValueError:
            rejected.append(token)
            continue
        if not 0 < value <= max_value:
            rejected.append(token)
    return rejected
