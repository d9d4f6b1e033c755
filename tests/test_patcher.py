from datetime import datetime, timezone

import pytest

from src.config.settings import FREE_MARKER, PREMIUM_MARKER
from src.publish.patcher import DocumentPatcher, MarkerSlot, SectionSlot

T1 = datetime(2025, 10, 19, 9, 5, tzinfo=timezone.utc)
T2 = datetime(2025, 10, 20, 18, 40, tzinfo=timezone.utc)

PAGE = f"""<html><body>
<div class="free">{FREE_MARKER}</div>
<div class="premium">{PREMIUM_MARKER}</div>
<footer>Last Updated: never</footer>
</body></html>"""


def _marker_patcher():
    return DocumentPatcher(MarkerSlot(FREE_MARKER), MarkerSlot(PREMIUM_MARKER),
                           "Africa/Nairobi", "%a, %d %b, %H:%M")


def test_marker_replaced_in_place():
    out = _marker_patcher().patch(PAGE, "<p>FREE</p>", "<p>PREM</p>", T1)
    assert FREE_MARKER not in out and PREMIUM_MARKER not in out
    assert '<div class="free"><p>FREE</p></div>' in out
    assert '<div class="premium"><p>PREM</p></div>' in out


def test_missing_marker_is_noop():
    page = "<div>static</div>\n<footer>Last Updated: never</footer>"
    out = _marker_patcher().patch(page, "<p>FREE</p>", "<p>PREM</p>", T1)
    assert out.startswith("<div>static</div>")
    assert "FREE" not in out and "PREM" not in out


def test_marker_only_first_occurrence():
    out = MarkerSlot("<!--M-->").apply("a<!--M-->b<!--M-->c", "X")
    assert out == "aXb<!--M-->c"


def test_fragment_with_backslashes_inserted_literally():
    out = SectionSlot("<s>", "</s>").apply("<s>old</s>", r"C:\new \1 \g<0>")
    assert r"C:\new \1 \g<0>" in out


def test_timestamp_updated_each_time_once():
    patcher = _marker_patcher()
    first = patcher.patch(PAGE, "F", "P", T1)
    assert "Last Updated: Sun, 19 Oct, 12:05</footer>" in first
    second = patcher.patch(first, "F", "P", T2)
    assert "Last Updated: Mon, 20 Oct, 21:40</footer>" in second
    assert second.count("Last Updated:") == 1


def test_section_replaced_non_greedy_and_repeatable():
    slot = SectionSlot('<div id="free">', "</div><!--/free-->", header="<h2>Free</h2>")
    page = '<div id="free">old</div><!--/free--><div id="x">keep</div><!--/free-->'
    once = slot.apply(page, "NEW1")
    assert once == '<div id="free"><h2>Free</h2>NEW1\n</div><!--/free--><div id="x">keep</div><!--/free-->'
    twice = slot.apply(once, "NEW2")
    assert "NEW1" not in twice and "NEW2" in twice
    assert twice.count("<h2>Free</h2>") == 1


def test_section_spans_lines():
    slot = SectionSlot("<s>", "</s>")
    assert slot.apply("<s>\nline1\nline2\n</s>", "X") == "<s>X\n</s>"


def test_missing_section_is_noop():
    page = "<div>nothing</div>"
    assert SectionSlot("<s>", "</s>").apply(page, "X") == page


def test_load_and_save_roundtrip_path(tmp_path):
    path = tmp_path / "index.html"
    path.write_text("old ⚽", encoding="utf-8")
    assert DocumentPatcher.load(path) == "old ⚽"
    DocumentPatcher.save(path, "new 🏆")
    assert path.read_text(encoding="utf-8") == "new 🏆"


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DocumentPatcher.load(tmp_path / "missing.html")


def test_naive_now_is_taken_as_utc():
    out = _marker_patcher().stamp("<footer>Last Updated: never</footer>", datetime(2025, 10, 19, 9, 5))
    assert out == "<footer>Last Updated: Sun, 19 Oct, 12:05</footer>"
