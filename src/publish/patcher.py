# src/publish/patcher.py
"""
Splices rendered fragments into the static index.html.

Two slot kinds, chosen explicitly per slot:
- MarkerSlot: a literal placeholder (usually an HTML comment) replaced once.
  The marker is consumed, so the slot only fills on the first run.
- SectionSlot: everything between a start and end tag (non-greedy) is
  rebuilt as start + header + fragment + end on every run.
A slot that is not found leaves the document untouched.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Union
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r"Last Updated: [^<]*")
TIMESTAMP_LABEL = "Last Updated: "


def as_utc(dt: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True)
class MarkerSlot:
    marker: str

    def apply(self, text: str, fragment: str) -> str:
        if self.marker not in text:
            logger.debug("Marker not found: %s", self.marker)
            return text
        return text.replace(self.marker, fragment, 1)


@dataclass(frozen=True)
class SectionSlot:
    start: str
    end: str
    header: str = ""

    def apply(self, text: str, fragment: str) -> str:
        pattern = re.compile(re.escape(self.start) + r".*?" + re.escape(self.end), re.DOTALL)
        replacement = f"{self.start}{self.header}{fragment}\n{self.end}"
        new_text, n = pattern.subn(lambda _m: replacement, text, count=1)
        if not n:
            logger.debug("Section not found: %s ... %s", self.start, self.end)
        return new_text


Slot = Union[MarkerSlot, SectionSlot]


class DocumentPatcher:
    def __init__(self, free_slot: Slot, premium_slot: Slot, tz_name: str,
                 updated_format: str = "%a, %d %b, %I:%M %p"):
        self.free_slot = free_slot
        self.premium_slot = premium_slot
        self.tz = ZoneInfo(tz_name)
        self.updated_format = updated_format

    def stamp(self, text: str, now: datetime) -> str:
        label = TIMESTAMP_LABEL + as_utc(now).astimezone(self.tz).strftime(self.updated_format)
        return TIMESTAMP_PATTERN.sub(lambda _m: label, text, count=1)

    def patch(self, text: str, free_html: str, premium_html: str, now: datetime) -> str:
        text = self.free_slot.apply(text, free_html)
        text = self.premium_slot.apply(text, premium_html)
        return self.stamp(text, now)

    @staticmethod
    def load(path: Union[str, Path]) -> str:
        return Path(path).read_text(encoding="utf-8")

    @staticmethod
    def save(path: Union[str, Path], text: str) -> None:
        # overwrites in place; no backup copy
        Path(path).write_text(text, encoding="utf-8")
