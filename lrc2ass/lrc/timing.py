from __future__ import annotations

import logging

from lrc2ass.errors import TimingOrderError

from .model import LrcDocument, Lyrics, LyricsTiming

logger = logging.getLogger(__name__)


def build_lyrics(doc: LrcDocument) -> Lyrics:
    """
    Flatten timed locations into a sequential timing list.

    A sentinel timing at 0 ms is prepended so the first real timing's predecessor
    (the stretch of silence before it) has a duration too. Each timing's duration
    runs until the next one; the last stays 0. Line indexes are compacted to the
    lines that carry timestamps, in order of first appearance.
    """
    if not doc.timed_locations:
        return Lyrics()

    timings: list[LyricsTiming] = [LyricsTiming(0, 0, 0, 0, 0)]
    # dict as an insertion-ordered set
    seen: dict[int, None] = {}

    for loc in doc.timed_locations:
        prev = timings[-1]
        if loc.time_ms < prev.time_ms:
            raise TimingOrderError(
                f"Timestamp {loc.time_ms} ms on line {loc.source_line_index + 1} "
                f"is earlier than the previous one ({prev.time_ms} ms)"
            )
        timings[-1] = LyricsTiming(
            time_ms=prev.time_ms,
            duration_ms=loc.time_ms - prev.time_ms,
            line_index=prev.line_index,
            char_from=prev.char_from,
            char_to=prev.char_to,
        )
        seen.setdefault(loc.source_line_index, None)
        timings.append(
            LyricsTiming(
                time_ms=loc.time_ms,
                duration_ms=0,
                line_index=len(seen) - 1,
                char_from=loc.char_from,
                char_to=loc.char_to,
            )
        )

    texts = {line.source_line_index: line.text for line in doc.lines}
    # a line may carry timestamps and no text at all, e.g. a bare end marker
    lines = tuple(texts.get(index, "") for index in seen)

    logger.debug("Normalized %d timings over %d lyric lines", len(timings), len(lines))
    return Lyrics(lines=lines, timings=tuple(timings))
