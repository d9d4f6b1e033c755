# src/config/settings.py
"""
Configuración del updater.

Los valores ajustables se leen del entorno (con .env vía python-dotenv) y se
agrupan en un dataclass inmutable que se pasa a cada componente. Las tablas
fijas (ligas, apuestas, equipos de respaldo) son tuplas.
"""

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

THESPORTSDB_BASE_URL = os.getenv("THESPORTSDB_BASE_URL", "https://www.thesportsdb.com/api/v1/json")
THESPORTSDB_API_KEY = os.getenv("THESPORTSDB_API_KEY", "3")  # public test key
DEFAULT_TIMEOUT = int(os.getenv("HTTP_TIMEOUT", "30"))
USER_AGENT = os.getenv("HTTP_USER_AGENT", "Predictz/1.0")
FETCH_STRATEGY = os.getenv("FETCH_STRATEGY", "filter")
SITE_INDEX_PATH = os.getenv("SITE_INDEX_PATH", "index.html")
SITE_SLOT_MODE = os.getenv("SITE_SLOT_MODE", "marker")
TIMEZONE = os.getenv("TIMEZONE", "Africa/Nairobi")
KICKOFF_FORMAT = os.getenv("KICKOFF_FORMAT", "%I:%M %p")
UPDATED_FORMAT = os.getenv("UPDATED_FORMAT", "%a, %d %b, %I:%M %p")

TARGET_LEAGUES: Tuple[str, ...] = (
    "English Premier League",
    "Spanish La Liga",
    "Italian Serie A",
    "German Bundesliga",
)

LEAGUE_ALIASES: Tuple[str, ...] = (
    "premier league",
    "la liga",
    "serie a",
    "bundesliga",
)

BETS: Tuple[str, ...] = ("Over 2.5", "BTTS", "Double Chance", "Draw or Away", "Handicap -1")


@dataclass(frozen=True)
class Team:
    name: str
    league: str


FALLBACK_TEAMS: Tuple[Team, ...] = (
    # EPL
    Team("Arsenal", "English Premier League"),
    Team("Liverpool", "English Premier League"),
    Team("Chelsea", "English Premier League"),
    Team("Man City", "English Premier League"),
    Team("Man United", "English Premier League"),
    Team("Tottenham", "English Premier League"),
    Team("Newcastle", "English Premier League"),
    Team("Aston Villa", "English Premier League"),
    # La Liga
    Team("Real Madrid", "Spanish La Liga"),
    Team("Barcelona", "Spanish La Liga"),
    Team("Atletico Madrid", "Spanish La Liga"),
    Team("Real Sociedad", "Spanish La Liga"),
    Team("Villarreal", "Spanish La Liga"),
    # Serie A
    Team("Juventus", "Italian Serie A"),
    Team("AC Milan", "Italian Serie A"),
    Team("Inter Milan", "Italian Serie A"),
    Team("Napoli", "Italian Serie A"),
    Team("Roma", "Italian Serie A"),
    # Bundesliga
    Team("Bayern Munich", "German Bundesliga"),
    Team("Dortmund", "German Bundesliga"),
    Team("Leipzig", "German Bundesliga"),
    Team("Leverkusen", "German Bundesliga"),
)

FREE_MARKER = "<!-- AUTO-INSERTED FREE MATCHES WILL APPEAR HERE -->"
PREMIUM_MARKER = "<!-- AUTO-INSERTED PREMIUM MATCHES WILL APPEAR HERE -->"

FREE_SECTION = ('<div id="free-predictions">', "</div><!-- /free-predictions -->")
PREMIUM_SECTION = ('<div id="premium-predictions">', "</div><!-- /premium-predictions -->")
FREE_HEADER = "\n<h2>🔥 Today's Free AI Picks</h2>\n"
PREMIUM_HEADER = "\n<h2>💎 Premium AI Picks</h2>\n"

FREE_POOL = 10
FREE_LIMIT = 5
PREMIUM_LIMIT = 3
FALLBACK_COUNT = 8


@dataclass(frozen=True)
class Settings:
    base_url: str = THESPORTSDB_BASE_URL
    api_key: str = THESPORTSDB_API_KEY
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT
    fetch_strategy: str = FETCH_STRATEGY
    index_path: str = SITE_INDEX_PATH
    slot_mode: str = SITE_SLOT_MODE
    timezone: str = TIMEZONE
    kickoff_format: str = KICKOFF_FORMAT
    updated_format: str = UPDATED_FORMAT
    target_leagues: Tuple[str, ...] = TARGET_LEAGUES
    league_aliases: Tuple[str, ...] = LEAGUE_ALIASES
    bets: Tuple[str, ...] = BETS
    fallback_teams: Tuple[Team, ...] = field(default=FALLBACK_TEAMS)
    fallback_count: int = FALLBACK_COUNT
    free_pool: int = FREE_POOL
    free_limit: int = FREE_LIMIT
    premium_limit: int = PREMIUM_LIMIT

    @property
    def league_allow_list(self) -> Tuple[str, ...]:
        """Canonical names plus short aliases, lower-cased."""
        return tuple(n.lower() for n in self.target_leagues + self.league_aliases)
