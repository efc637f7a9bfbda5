"""Numeric argument extraction for command text.

Failure is always reported as ``None``; nothing here raises on bad input.
"""

import math


def _to_number(token: str) -> float | None:
    if "_" in token:  # float() accepts digit separators, we don't
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_one(text: str | None) -> float | None:
    """Parse the whole trailing text as a single number."""
    token = (text or "").strip()
    if not token:
        return None
    return _to_number(token)


def parse_two(text: str | None) -> tuple[float | None, float | None]:
    """Parse the first two whitespace-separated tokens.

    Fewer than two tokens gives ``(None, None)``: a lone value is never
    placed in the first slot. Each token is parsed on its own, so
    ``"5 b"`` gives ``(5.0, None)``.
    """
    parts = (text or "").split()
    if len(parts) < 2:
        return None, None
    return _to_number(parts[0]), _to_number(parts[1])
