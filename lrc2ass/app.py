from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from pathlib import Path

from lrc2ass.errors import LrcIOError
from lrc2ass.karaoke.lines import build_karaoke_lines
from lrc2ass.lrc.parse import parse_lines
from lrc2ass.lrc.timing import build_lyrics
from lrc2ass.render.ass import render_ass
from lrc2ass.style import AssSubtitleStyle, SubtitleStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionSummary:
    lyric_lines: int
    timings: int
    dialogue_events: int
    output_path: Path | None = None


def read_lrc_file(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise LrcIOError(f"Cannot read {path}: {e}") from e
    return text.splitlines()


def write_ass_file(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise LrcIOError(f"Cannot write to {path}: {e}") from e


def _render(lines: list[str], style: SubtitleStyle) -> tuple[str, ConversionSummary]:
    doc = parse_lines(lines)
    lyrics = build_lyrics(doc)
    karaoke_lines = build_karaoke_lines(lyrics)
    text = render_ass(karaoke_lines, AssSubtitleStyle.from_style(style), title=doc.metadata.get("ti", ""))
    summary = ConversionSummary(
        lyric_lines=len(lyrics.lines),
        timings=len(doc.timed_locations),
        dialogue_events=len(karaoke_lines),
    )
    return text, summary


def convert_text(lrc_text: str, style: SubtitleStyle | None = None) -> str:
    """LRC text in, ASS text out. No I/O."""
    text, _summary = _render(lrc_text.splitlines(), style or SubtitleStyle())
    return text


def convert_file(src: Path, dst: Path, style: SubtitleStyle | None = None) -> ConversionSummary:
    """
    Pipeline:
    read -> parse (offsets applied) -> normalize timings -> karaoke lines -> ASS -> write.
    """
    lines = read_lrc_file(src)
    logger.debug("Read %d lines from %s", len(lines), src)
    text, summary = _render(lines, style or SubtitleStyle())
    write_ass_file(dst, text)
    logger.info(
        "Wrote %s: %d dialogue events, %d timings",
        dst,
        summary.dialogue_events,
        summary.timings,
    )
    return replace(summary, output_path=dst)
