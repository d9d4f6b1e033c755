# src/ingest/fallback.py
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence

from src.config.settings import Team
from src.ingest.models import Fixture


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FallbackGenerator:
    """
    Fabricates plausible fixtures from a static team table when the live
    provider yields nothing usable.

    Kickoff is now + a random offset inside the next 24h, to the minute.
    """

    def __init__(self, teams: Sequence[Team], count: int = 8,
                 rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        if len({t.name for t in teams}) < 2:
            raise ValueError("Fallback needs at least two distinct teams")
        self.teams = tuple(teams)
        self.count = count
        self.rng = rng or random.Random()
        self.clock = clock or _utcnow

    def _kickoff(self) -> datetime:
        now = self.clock().replace(second=0, microsecond=0)
        return now + timedelta(minutes=self.rng.randrange(24 * 60))

    def generate(self) -> List[Fixture]:
        matches = []
        for _ in range(self.count):
            home = self.rng.choice(self.teams)
            away = self.rng.choice(self.teams)
            while away.name == home.name:
                away = self.rng.choice(self.teams)
            matches.append(Fixture(home=home.name, away=away.name,
                                   kickoff=self._kickoff(), league=home.league))
        return matches
