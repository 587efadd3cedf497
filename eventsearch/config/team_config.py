#!filepath: eventsearch/config/team_config.py
from typing import Optional

from pydantic import BaseModel, Field


class TeamConfig(BaseModel):
    strict: bool = False
    n_teams: Optional[int] = Field(default=None, ge=0)
