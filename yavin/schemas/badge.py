"""
Pydantic schemas for badges.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Badge(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    icon: str
    xp_reward: int


class BadgeCheckRequest(BaseModel):
    trigger: Optional[str] = None


class BadgeCatalogResponse(BaseModel):
    success: bool = True
    earned: List[Badge]
    available: List[Badge]


class BadgeCheckResponse(BaseModel):
    success: bool = True
    new_badges: List[Badge]
