from __future__ import annotations
import os
from typing import Optional


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> Optional[int]:
    """Python recursion limit to use while running a program, or None to leave it alone."""
    limit = int_from_env('SCHEMY_RECURSION_LIMIT')
    if limit is not None and limit <= 0:
        raise ValueError(f"SCHEMY_RECURSION_LIMIT must be positive, got {limit}")
    return limit
