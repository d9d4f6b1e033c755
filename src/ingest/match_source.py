"""
Fuente de partidos del día.
Consulta TheSportsDB, filtra a las ligas objetivo y, si no queda nada usable
(error de red, payload raro o lista vacía), usa el generador de respaldo.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from src.config.settings import Settings
from src.ingest import thesportsdb_client
from src.ingest.fallback import FallbackGenerator
from src.ingest.models import Fixture

logger = logging.getLogger(__name__)

STRATEGIES = ("filter", "per_league")


def filter_by_league(events: Iterable[Dict[str, Any]], allow: Sequence[str]) -> List[Dict[str, Any]]:
    """Keep events whose league contains any allow-list entry, case-insensitively."""
    allow_l = [a.lower() for a in allow]
    kept = []
    for ev in events:
        league = ev.get("strLeague")
        if not isinstance(league, str):
            continue
        league = league.lower()
        if league and any(a in league for a in allow_l):
            kept.append(ev)
    return kept


def parse_kickoff(event: Dict[str, Any]) -> Union[datetime, str]:
    """
    Kickoff as an aware UTC datetime. Tries strTimestamp, then
    dateEvent + strTime, then dateEvent alone; falls back to the raw string.
    """
    date = event.get("dateEvent") or ""
    candidates = [event.get("strTimestamp")]
    if date and event.get("strTime"):
        candidates.append(f"{date}T{event['strTime']}")
    candidates.append(date)
    for raw in candidates:
        if not raw:
            continue
        try:
            dt = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    return str(event.get("strTimestamp") or date)


def to_fixture(event: Dict[str, Any]) -> Optional[Fixture]:
    home = event.get("strHomeTeam")
    away = event.get("strAwayTeam")
    if not isinstance(home, str) or not isinstance(away, str) or not home or not away:
        return None
    league = event.get("strLeague")
    return Fixture(home=home, away=away, kickoff=parse_kickoff(event),
                   league=league if isinstance(league, str) else "")


def _events_from(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        raise thesportsdb_client.APIClientError("Payload is not a JSON object")
    events = payload.get("events")
    if events is None:
        return []
    if not isinstance(events, list):
        raise thesportsdb_client.APIClientError("'events' is not a list")
    return [e for e in events if isinstance(e, dict)]


class MatchSource:
    def __init__(self, settings: Settings, fallback: FallbackGenerator):
        if settings.fetch_strategy not in STRATEGIES:
            raise ValueError(f"Unknown fetch strategy '{settings.fetch_strategy}'")
        self.settings = settings
        self.fallback = fallback

    def _fetch_all(self, date: str) -> List[Dict[str, Any]]:
        payload = thesportsdb_client.get_events_day(self.settings, date)
        return filter_by_league(_events_from(payload), self.settings.league_allow_list)

    def _fetch_per_league(self, date: str) -> List[Dict[str, Any]]:
        events: List[Dict[str, Any]] = []
        for league in self.settings.target_leagues:
            try:
                payload = thesportsdb_client.get_events_day(self.settings, date, league=league)
                events.extend(_events_from(payload))
            except thesportsdb_client.APIClientError as e:
                logger.warning("Fetch failed for %s: %s", league, e)
        return filter_by_league(events, self.settings.league_allow_list)

    def fetch(self, date: str) -> List[Fixture]:
        """
        Today's fixtures for the target leagues, or fallback fixtures.
        Never raises for provider problems.
        """
        try:
            if self.settings.fetch_strategy == "per_league":
                events = self._fetch_per_league(date)
            else:
                events = self._fetch_all(date)
        except thesportsdb_client.APIClientError as e:
            logger.warning("API error for %s: %s. Using fallback.", date, e)
            return self.fallback.generate()

        fixtures = [f for f in (to_fixture(e) for e in events) if f is not None]
        if not fixtures:
            logger.warning("No matches from target leagues for %s, using fallback", date)
            return self.fallback.generate()
        logger.info("Fetched %d matches from target leagues for %s", len(fixtures), date)
        return fixtures
