"""
Achievement evaluator.

Each rule is a predicate over the post-mutation progress state.
Evaluation is pure and returns every rule currently satisfied; whether
an unlock is *new* is decided by the insert-if-absent write in the
service layer, which keeps unlocks at most once per subject even when
a predicate holds again later (e.g. a second 7-day streak).
"""

from __future__ import annotations

from typing import Callable

from app.schemas.achievement import AchievementDefinition
from app.schemas.progress import ProgressSnapshot


class AchievementRule:
    """An achievement definition plus its unlock predicate."""

    def __init__(self, definition: AchievementDefinition, predicate: Callable[[ProgressSnapshot], bool]):
        self.definition = definition
        self.predicate = predicate

    @property
    def id(self) -> str:
        return self.definition.id

    def is_met(self, state: ProgressSnapshot) -> bool:
        return self.predicate(state)


def _rule(id, name, description, category, xp_reward, predicate) -> AchievementRule:
    return AchievementRule(
        AchievementDefinition(
            id=id, name=name, description=description, category=category, xp_reward=xp_reward,
        ),
        predicate,
    )


# ======================================================================
# Catalogue
# ======================================================================

ACHIEVEMENT_RULES: list[AchievementRule] = [
    _rule("first_workout", "First Step", "Complete your first workout.",
          "fitness", 50, lambda s: s.total_workouts == 1),
    _rule("weekly_warrior", "Weekly Warrior", "Work out 7 days in a row.",
          "consistency", 200, lambda s: s.current_streak == 7),
    _rule("monthly_hero", "Monthly Hero", "Complete 30 workouts.",
          "fitness", 300, lambda s: s.total_workouts == 30),
    _rule("iron_streak", "Iron Streak", "Work out 30 days in a row.",
          "consistency", 500, lambda s: s.current_streak == 30),
    _rule("video_explorer", "Curious Student", "Watch 10 training videos.",
          "learning", 100, lambda s: s.videos_watched >= 10),
    _rule("hour_of_power", "Hour of Power", "Accumulate 60 minutes of training.",
          "fitness", 75, lambda s: s.total_minutes >= 60),
    _rule("centurion", "Centurion", "Complete 100 workouts.",
          "fitness", 1000, lambda s: s.total_workouts >= 100),
    _rule("loyal_member", "Loyal Member", "Be active on 30 different days.",
          "consistency", 300, lambda s: s.active_days >= 30),
]

ACHIEVEMENTS_BY_ID: dict[str, AchievementRule] = {rule.id: rule for rule in ACHIEVEMENT_RULES}


# ======================================================================
# Public API
# ======================================================================


def catalogue() -> list[AchievementDefinition]:
    return [rule.definition for rule in ACHIEVEMENT_RULES]


def evaluate(state: ProgressSnapshot, already_unlocked: set[str] = frozenset()) -> list[AchievementRule]:
    """Rules satisfied by ``state`` and not in ``already_unlocked``, in catalogue order."""
    return [
        rule for rule in ACHIEVEMENT_RULES
        if rule.id not in already_unlocked and rule.is_met(state)
    ]
