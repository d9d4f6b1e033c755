# src/render/cards.py
import random
from datetime import datetime, timezone
from html import escape
from typing import List, Optional, Sequence, Union
from zoneinfo import ZoneInfo

from src.ml.random_predictor import Pick

HIGH_CONFIDENCE = 80
PREMIUM_MAX = 3
EV_MIN = 12.0
EV_SPAN = 10.0


class CardRenderer:
    """Turns picks into HTML card fragments, free (full detail) or premium (locked teaser)."""

    def __init__(self, tz_name: str, kickoff_format: str = "%I:%M %p",
                 rng: Optional[random.Random] = None):
        self.tz = ZoneInfo(tz_name)
        self.kickoff_format = kickoff_format
        self.rng = rng or random.Random()

    def format_kickoff(self, value: Union[datetime, str]) -> str:
        if isinstance(value, datetime):
            dt = value
        else:
            try:
                dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
            except ValueError:
                return str(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(self.tz).strftime(self.kickoff_format)

    def free_card(self, pick: Pick) -> str:
        f, p = pick.fixture, pick.prediction
        tier = "high" if p.confidence > HIGH_CONFIDENCE else "medium"
        return f"""
        <div class="prediction-card">
          <div class="match">🏆 {escape(f.home)} vs {escape(f.away)}</div>
          <div class="meta">{escape(f.league)} • {escape(self.format_kickoff(f.kickoff))}</div>
          <div class="prediction">🎯 {escape(p.outcome)} <span class="confidence {tier}">{p.confidence}%</span></div>
          <div class="bet">💡 Bet: {escape(p.bet)}</div>
          <div class="odds">💰 Odds: {p.odds_label}</div>
        </div>
      """

    def locked_card(self, position: int) -> str:
        ev = self.rng.uniform(EV_MIN, EV_MIN + EV_SPAN)
        return f"""
        <div class="prediction-card locked">
          <div class="match">🔒 Premium Pick {position}</div>
          <div class="prediction">🎯 Subscribe to unlock elite AI picks</div>
          <div class="ev">💰 EV: <span class="ev-high">+{ev:.1f}%</span></div>
        </div>
      """

    def render(self, picks: Sequence[Pick], premium: bool = False, limit: int = 5) -> str:
        """
        Free mode: one card per pick, first `limit` picks in input order.
        Premium mode: min(limit, 3) locked cards; no fixture data is shown,
        so the count does not depend on how many picks came in.
        """
        if premium:
            cards: List[str] = [self.locked_card(i + 1) for i in range(max(0, min(limit, PREMIUM_MAX)))]
        else:
            cards = [self.free_card(p) for p in list(picks)[:max(0, limit)]]
        return "\n".join(cards)
