"""Replay a month of activity through the progress ledger.

Pure engine only (no database): prints the streak, XP and level after
every day and the achievements that would unlock along the way.

Usage:
    python scripts/simulate_progress.py
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.momentum import achievements, ledger
from app.momentum.levels import level_info
from app.schemas.activity import ActivityEventCreate

START = datetime.datetime(2026, 9, 1, 18, 30)

# (day offset, type, duration, calories); a gap on days 9-10 breaks the streak.
SCHEDULE = (
    [(d, "login", 0, None) for d in range(31)]
    + [(d, "workout", 45, 320) for d in range(0, 8)]
    + [(d, "workout", 30, 210) for d in range(10, 31)]
    + [(d, "video_watched", 12, None) for d in range(0, 31, 3)]
)


def main() -> None:
    state = ledger.initial_state("demo-subject")
    unlocked: set[str] = set()

    print(f"{'day':>10}  {'streak':>6}  {'longest':>7}  {'xp':>6}  {'level':>5}  unlocked")
    for offset, kind, duration, calories in sorted(SCHEDULE):
        event = ActivityEventCreate(
            type=kind,
            duration_min=duration,
            calories_burned=calories,
            occurred_at=START + datetime.timedelta(days=offset),
        )
        state, _ = ledger.apply(state, event)

        new = []
        for rule in achievements.evaluate(state, unlocked):
            unlocked.add(rule.id)
            state = ledger.credit_xp(state, rule.definition.xp_reward)
            state = state.model_copy(update={"achievements_count": state.achievements_count + 1})
            new.append(rule.id)

        if kind == "workout" or new:
            day = event.occurred_at.date().isoformat()
            print(f"{day:>10}  {state.current_streak:>6}  {state.longest_streak:>7}  "
                  f"{state.total_xp:>6}  {state.level:>5}  {', '.join(new)}")

    info = level_info(state.total_xp)
    print()
    print(f"Level {info.level}: {info.xp_into_level}/{info.next_level_xp - info.level_start_xp} XP "
          f"({info.progress_pct}%)")


if __name__ == "__main__":
    main()
