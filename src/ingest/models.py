# src/ingest/models.py
from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class Fixture:
    home: str
    away: str
    kickoff: Union[datetime, str]
    league: str
