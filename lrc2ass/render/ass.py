from __future__ import annotations

import logging

from lrc2ass.karaoke.lines import KaraokeLine, KaraokeLineSegment
from lrc2ass.style import AssSubtitleStyle

logger = logging.getLogger(__name__)

MAX_LEAD_IN_MS = 2000
LONG_SEGMENT_MS = 700
LEAD_IN_TEXT = "— "

_SCRIPT_INFO = """[Script Info]
; This is a Sub Station Alpha v4 script.
Title: {title}
ScriptType: v4.00+
WrapStyle: 0
ScaledBorderAndShadow: yes
Collisions: Normal"""

# Default is bottom-centre (2), Overlay is top-centre (8)
_STYLES = """[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H{primary},&H{secondary},&H00000000,&H00666666,-1,0,0,0,100,100,0,0,1,3,0,2,10,10,10,1
Style: Overlay,Arial,20,&H{primary},&H{secondary},&H00000000,&H00666666,-1,0,0,0,100,100,0,0,1,3,0,8,10,10,10,1"""

_EVENTS = """[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"""


def format_ass_time(ms: int) -> str:
    # H:MM:SS.cc, centiseconds truncated
    h, rem = divmod(ms, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms2 = divmod(rem, 1_000)
    return f"{h}:{m:02d}:{s:02d}.{ms2 // 10:02d}"


def format_karaoke_tag(duration_ms: int, text: str) -> str:
    return f"{{\\k{duration_ms // 10}}}{text}"


def format_long_karaoke_tag(duration_ms: int, text: str, style: AssSubtitleStyle) -> str:
    """Highlight a held syllable in the long-text color, then switch back."""
    return (
        f"{{\\k{duration_ms // 10}\\2c&H{style.long_text_secondary_color}&}}"
        f"{text}"
        f"{{\\2c&H{style.secondary_color}&}}"
    )


def format_segment(segment: KaraokeLineSegment, style: AssSubtitleStyle) -> str:
    if segment.duration_ms < LONG_SEGMENT_MS:
        return format_karaoke_tag(segment.duration_ms, segment.text)
    return format_long_karaoke_tag(segment.duration_ms, segment.text, style)


def lead_in_ms(lines: list[KaraokeLine], i: int) -> int:
    """
    Time a line is shown before its first syllable.

    At most MAX_LEAD_IN_MS, never before 0 and never before the line two
    positions back has ended.
    """
    start = lines[i].start_ms
    earliest = max(0, start - MAX_LEAD_IN_MS)
    if i >= 2 and lines[i - 2].end_ms > earliest:
        earliest = lines[i - 2].end_ms
    return max(0, start - earliest)


def header_lines(style: AssSubtitleStyle, title: str = "") -> list[str]:
    out: list[str] = []
    out.extend(_SCRIPT_INFO.format(title=title).split("\n"))
    out.append("")
    out.extend(_STYLES.format(primary=style.primary_color, secondary=style.secondary_color).split("\n"))
    out.append("")
    out.extend(_EVENTS.split("\n"))
    return out


def dialogue_line(lines: list[KaraokeLine], i: int, style: AssSubtitleStyle) -> str:
    line = lines[i]
    lead_in = lead_in_ms(lines, i)
    tags = [format_karaoke_tag(lead_in, LEAD_IN_TEXT)]
    tags.extend(format_segment(seg, style) for seg in line.segments)
    return (
        f"Dialogue: 1,{format_ass_time(line.start_ms - lead_in)},{format_ass_time(line.end_ms)},"
        f"Default,,0,0,0,,{''.join(tags)}"
    )


def render_ass(karaoke_lines: list[KaraokeLine], style: AssSubtitleStyle, title: str = "") -> str:
    out = header_lines(style, title)
    for i in range(len(karaoke_lines)):
        out.append(dialogue_line(karaoke_lines, i, style))
    logger.debug("Rendered %d dialogue events", len(karaoke_lines))
    return "\n".join(out)
