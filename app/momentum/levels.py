"""
Level curve.

Going from level ``n`` to ``n + 1`` costs ``100 + (n − 1)·150`` XP, so
the cumulative thresholds are 0, 100, 350, 750, 1300, ...  Levels only
depend on total XP, and total XP never decreases, so levels never
decrease either.
"""

from __future__ import annotations

from app.schemas.progress import LevelInfo

BASE_LEVEL_COST = 100
LEVEL_COST_STEP = 150


def xp_for_next_level(level: int) -> int:
    """XP needed to go from ``level`` to ``level + 1``."""
    return BASE_LEVEL_COST + (level - 1) * LEVEL_COST_STEP


def xp_threshold(level: int) -> int:
    """Total XP at which ``level`` is reached."""
    n = level - 1
    return n * BASE_LEVEL_COST + LEVEL_COST_STEP * n * (n - 1) // 2


def level_from_xp(total_xp: int) -> int:
    level = 1
    while total_xp >= xp_threshold(level + 1):
        level += 1
    return level


def level_info(total_xp: int) -> LevelInfo:
    level = level_from_xp(total_xp)
    start = xp_threshold(level)
    span = xp_for_next_level(level)
    into = total_xp - start
    return LevelInfo(
        level=level,
        total_xp=total_xp,
        level_start_xp=start,
        next_level_xp=start + span,
        xp_into_level=into,
        xp_to_next_level=span - into,
        progress_pct=round(100.0 * into / span, 1),
    )
