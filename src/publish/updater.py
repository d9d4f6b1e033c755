# src/publish/updater.py
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple, Union

from src.config.settings import (
    FREE_HEADER, FREE_MARKER, FREE_SECTION,
    PREMIUM_HEADER, PREMIUM_MARKER, PREMIUM_SECTION,
    Settings,
)
from src.ingest.fallback import FallbackGenerator
from src.ingest.match_source import MatchSource
from src.ml.random_predictor import RandomPredictor
from src.publish.patcher import DocumentPatcher, MarkerSlot, SectionSlot, Slot, as_utc
from src.render.cards import CardRenderer

logger = logging.getLogger(__name__)


def build_slots(mode: str) -> Tuple[Slot, Slot]:
    if mode == "marker":
        return MarkerSlot(FREE_MARKER), MarkerSlot(PREMIUM_MARKER)
    if mode == "section":
        return (SectionSlot(*FREE_SECTION, header=FREE_HEADER),
                SectionSlot(*PREMIUM_SECTION, header=PREMIUM_HEADER))
    raise ValueError(f"Unknown slot mode '{mode}'")


def build_components(settings: Settings):
    """Wire source, predictor, renderer and patcher from configuration."""
    fallback = FallbackGenerator(settings.fallback_teams, count=settings.fallback_count)
    source = MatchSource(settings, fallback)
    predictor = RandomPredictor(settings.bets)
    renderer = CardRenderer(settings.timezone, settings.kickoff_format)
    free_slot, premium_slot = build_slots(settings.slot_mode)
    patcher = DocumentPatcher(free_slot, premium_slot, settings.timezone, settings.updated_format)
    return source, predictor, renderer, patcher


def update_site(path: Union[str, Path], source: MatchSource, predictor: RandomPredictor,
                renderer: CardRenderer, patcher: DocumentPatcher,
                now: Optional[datetime] = None, settings: Optional[Settings] = None) -> int:
    """
    Fetch, predict, render and patch the page at `path` in place.
    Returns the number of free cards inserted. File errors propagate.
    """
    settings = settings or Settings()
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)
    html = patcher.load(path)

    picks = predictor.attach(source.fetch(now.date().isoformat()))
    free_picks = picks[:settings.free_pool]
    free_html = renderer.render(free_picks, premium=False, limit=settings.free_limit)
    premium_html = renderer.render(picks, premium=True, limit=settings.premium_limit)

    patcher.save(path, patcher.patch(html, free_html, premium_html, now))
    inserted = min(len(free_picks), settings.free_limit)
    logger.debug("Rendered %d free cards from %d picks", inserted, len(picks))
    return inserted
