from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
import logging

from lrc2ass.lrc.model import Lyrics, LyricsTiming

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KaraokeLineSegment:
    duration_ms: int
    text: str  # empty for a pure timing marker


@dataclass(frozen=True, slots=True)
class KaraokeLine:
    start_ms: int
    end_ms: int
    segments: tuple[KaraokeLineSegment, ...]


def build_karaoke_line(timings: list[LyricsTiming], text: str) -> KaraokeLine:
    segments = [KaraokeLineSegment(duration_ms=t.duration_ms, text=text[t.char_from : t.char_to]) for t in timings]
    # a trailing marker only closes the last syllable, it has nothing to highlight
    if segments and not segments[-1].text:
        segments.pop()
    return KaraokeLine(
        start_ms=timings[0].time_ms,
        end_ms=timings[-1].time_ms,
        segments=tuple(segments),
    )


def build_karaoke_lines(lyrics: Lyrics) -> list[KaraokeLine]:
    """
    Regroup the flat timing sequence into display lines.

    Runs of equal line_index are contiguous since line_index never decreases.
    """
    out: list[KaraokeLine] = []
    for line_index, run in groupby(lyrics.timings, key=lambda t: t.line_index):
        out.append(build_karaoke_line(list(run), lyrics.lines[line_index]))
    logger.debug("Built %d karaoke lines", len(out))
    return out
