from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TimedLocation:
    time_ms: int
    source_line_index: int
    char_from: int  # from this character in line
    char_to: int  # to this character in line (exclusive)


@dataclass(frozen=True, slots=True)
class TextLine:
    source_line_index: int
    text: str


@dataclass(frozen=True, slots=True)
class TimeTag:
    time_ms: int


@dataclass(frozen=True, slots=True)
class OffsetTag:
    offset_ms: int


@dataclass(frozen=True, slots=True)
class UnknownTag:
    key: str
    value: str = ""


Tag = TimeTag | OffsetTag | UnknownTag
LineElement = TextLine | TimedLocation | OffsetTag | UnknownTag


@dataclass(frozen=True, slots=True)
class LrcDocument:
    lines: tuple[TextLine, ...]
    timed_locations: tuple[TimedLocation, ...]
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LyricsTiming:
    time_ms: int  # time in song at which this occurs
    duration_ms: int  # until the next timing
    line_index: int  # index into Lyrics.lines
    char_from: int
    char_to: int


@dataclass(frozen=True, slots=True)
class Lyrics:
    lines: tuple[str, ...] = ()
    timings: tuple[LyricsTiming, ...] = ()
