"""
Achievement catalogue and unlock schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AchievementDefinition(BaseModel):
    id: str
    name: str
    description: str
    category: str
    xp_reward: int


class AchievementUnlockResponse(BaseModel):
    achievement_id: str
    unlocked_at: datetime.datetime
    name: Optional[str] = None
    category: Optional[str] = None
    xp_reward: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
