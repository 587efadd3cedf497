#!filepath: eventsearch/config/search_config.py
from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    instrument: bool = False
    progress_every: int = Field(default=1000, ge=0)
