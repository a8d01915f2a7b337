from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


# --- Models ---
class GameTemplate(BaseModel):
    slug: str
    name: str
    description: str = ""
    is_life_based: bool = False
    is_time_limit_based: bool = False


class GameRecord(BaseModel):
    id: str
    name: str
    description: str = ""
    thumbnail_image: str = ""
    template_slug: str
    creator_id: str
    is_published: bool = False
    game_json: Dict[str, Any]
    total_played: int = 0
    created_at: datetime


class GameCreate(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    description: str = Field(default="", max_length=2000)
    thumbnail_image: str = ""
    is_publish_immediately: bool = False
    game_json: Dict[str, Any]


class GameUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    description: Optional[str] = Field(default=None, max_length=2000)
    thumbnail_image: Optional[str] = None
    is_publish: Optional[bool] = None
    game_json: Optional[Dict[str, Any]] = None


class Principal(BaseModel):
    user_id: str
    role: str = "USER"


class PublishUpdate(BaseModel):
    is_publish: bool


class LikeUpdate(BaseModel):
    is_like: bool
