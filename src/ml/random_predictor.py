# src/ml/random_predictor.py
"""
Synthetic "AI" predictions. Every field is a uniform random draw; nothing is
derived from team strength or market data.
"""

import math
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from src.ingest.models import Fixture

OUTCOMES = ("Home Win", "Draw", "Away Win")

MIN_CONFIDENCE = 65
CONFIDENCE_SPAN = 25
ODDS_FLOOR = 1.8
ODDS_SPAN = 1.5
ODDS_SPREAD = 0.5


@dataclass(frozen=True)
class Prediction:
    outcome: str
    confidence: int
    bet: str
    odds_low: float
    odds_high: float

    @property
    def odds_label(self) -> str:
        return f"{self.odds_low:.2f} — {self.odds_high:.2f}"


@dataclass(frozen=True)
class Pick:
    fixture: Fixture
    prediction: Prediction


class RandomPredictor:
    def __init__(self, bets: Sequence[str], rng: Optional[random.Random] = None):
        if not bets:
            raise ValueError("At least one bet type is required")
        self.bets = tuple(bets)
        self.rng = rng or random.Random()

    def predict(self, home: str, away: str) -> Prediction:
        # team names do not affect the draw
        confidence = math.floor(self.rng.uniform(0, CONFIDENCE_SPAN)) + MIN_CONFIDENCE
        outcome = self.rng.choice(OUTCOMES)
        bet = self.rng.choice(self.bets)
        odds_low = round(self.rng.uniform(ODDS_FLOOR, ODDS_FLOOR + ODDS_SPAN), 2)
        odds_high = round(odds_low + self.rng.uniform(0, ODDS_SPREAD), 2)
        return Prediction(outcome=outcome, confidence=confidence, bet=bet,
                          odds_low=odds_low, odds_high=odds_high)

    def attach(self, fixtures: Iterable[Fixture]) -> List[Pick]:
        return [Pick(fixture=f, prediction=self.predict(f.home, f.away)) for f in fixtures]
