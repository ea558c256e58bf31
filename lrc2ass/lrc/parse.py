from __future__ import annotations

from dataclasses import dataclass
import logging
import re
from typing import Iterable

from lrc2ass.errors import LrcFormatError, OffsetApplicationError

from .model import (
    LineElement,
    LrcDocument,
    OffsetTag,
    Tag,
    TextLine,
    TimedLocation,
    TimeTag,
    UnknownTag,
)

logger = logging.getLogger(__name__)

_OFFSET_VALUE_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lines_with_timestamps: int
    lines_ignored: int
    timings_total: int
    offset_ms: int


def _two_digits(field: str, what: str) -> int:
    if len(field) != 2 or not (field.isascii() and field.isdigit()):
        raise LrcFormatError(f"Bad {what} format ({field})")
    return int(field)


def parse_timestamp(text: str) -> int:
    """
    Parse "MM:SS.CC" or "MM:SS:CC" into milliseconds.

    Only the first 8 characters are significant, so "01:02.345" reads as 01:02.34.
    """
    if len(text) < 8:
        raise LrcFormatError(f"Timestamp too short ({text})")
    minutes = _two_digits(text[0:2], "minutes")
    if text[2] != ":":
        raise LrcFormatError(f"Bad seconds divider ({text[2]}) in {text}")
    seconds = _two_digits(text[3:5], "seconds")
    if text[5] not in ".:":
        raise LrcFormatError(f"Bad centiseconds divider ({text[5]}) in {text}")
    centiseconds = _two_digits(text[6:8], "centiseconds")
    return ((minutes * 60 + seconds) * 100 + centiseconds) * 10


def parse_tag(content: str) -> Tag:
    if not content:
        raise LrcFormatError("Tag content must not be empty")
    if content[0].isascii() and content[0].isdigit():
        return TimeTag(parse_timestamp(content))

    key, *rest = content.split(":")
    if key == "offset":
        if not rest:
            raise LrcFormatError(f"Wrong offset tag format (missing ':'): {content}")
        value = rest[0]
        if not _OFFSET_VALUE_RE.fullmatch(value):
            raise LrcFormatError(f"Bad offset format ({value})")
        return OffsetTag(int(value))
    # forward compatible: [ar:...], [ti:...], [by:...] and anything else
    return UnknownTag(key=key, value=":".join(rest))


def parse_line(text: str, source_index: int) -> list[LineElement]:
    """
    Split one LRC line into timed locations, directive tags and its plain text.

    Each timestamp marks the start of the text that follows it, up to the next tag:
        [00:01.00]Hel[00:01.50]lo[00:02.00]
    gives ranges [0, 3), [3, 5) and [5, 5) into "Hello".
    """
    if not text:
        return []
    first = text[0]
    if first != "[":
        raise LrcFormatError(
            f'Invalid lrc file format. First character in line: "{first}" '
            f"(hex bytes: {first.encode('utf-8').hex(' ')})"
        )

    elements: list[LineElement] = []
    texts: list[str] = []
    cursor = 0
    for part in text.split("[")[1:]:
        subparts = part.split("]")
        tag_body = subparts[0]
        trailing = subparts[1] if len(subparts) > 1 else ""

        tag = parse_tag(tag_body)
        match tag:
            case TimeTag(time_ms=time_ms):
                elements.append(
                    TimedLocation(
                        time_ms=time_ms,
                        source_line_index=source_index,
                        char_from=cursor,
                        char_to=cursor + len(trailing),
                    )
                )
            case OffsetTag() | UnknownTag():
                elements.append(tag)

        if trailing:
            texts.append(trailing)
            cursor += len(trailing)

    if texts:
        elements.append(TextLine(source_line_index=source_index, text="".join(texts)))
    return elements


def _apply_offset(location: TimedLocation, offset_ms: int) -> TimedLocation:
    if offset_ms == 0:
        return location
    shifted = location.time_ms + offset_ms
    if shifted < 0:
        raise OffsetApplicationError(f"Cannot apply offset {offset_ms} to value {location.time_ms}")
    return TimedLocation(
        time_ms=shifted,
        source_line_index=location.source_line_index,
        char_from=location.char_from,
        char_to=location.char_to,
    )


def _scan(lines: Iterable[str]) -> tuple[LrcDocument, LrcParseStats]:
    offset_ms = 0
    text_lines: list[TextLine] = []
    locations: list[TimedLocation] = []
    metadata: dict[str, str] = {}

    total = 0
    lines_with_ts = 0
    ignored = 0

    for index, raw in enumerate(lines):
        total += 1
        line = raw.rstrip("\r\n")
        if not line:
            ignored += 1
            continue

        try:
            elements = parse_line(line, index)
        except LrcFormatError as e:
            raise LrcFormatError(f"Line {index + 1}: {e}") from e

        has_ts = False
        for element in elements:
            match element:
                case TextLine():
                    text_lines.append(element)
                case TimedLocation():
                    try:
                        locations.append(_apply_offset(element, offset_ms))
                    except OffsetApplicationError as e:
                        raise OffsetApplicationError(f"Line {index + 1}: {e}") from e
                    has_ts = True
                case OffsetTag(offset_ms=value):
                    offset_ms = value
                    logger.debug("Applying offset %d from line %d", offset_ms, index + 1)
                case UnknownTag(key=key, value=value):
                    if key and value:
                        metadata[key.strip().lower()] = value.strip()
        if has_ts:
            lines_with_ts += 1

    doc = LrcDocument(lines=tuple(text_lines), timed_locations=tuple(locations), metadata=metadata)
    stats = LrcParseStats(
        lines_total=total,
        lines_with_timestamps=lines_with_ts,
        lines_ignored=ignored,
        timings_total=len(locations),
        offset_ms=offset_ms,
    )
    return doc, stats


def parse_lines(lines: Iterable[str]) -> LrcDocument:
    """
    Build an LrcDocument from raw source lines, in file order.

    [offset:ms] shifts every timestamp that comes after it, never the ones before.
    """
    doc, _stats = _scan(lines)
    return doc


def parse_lrc(text: str) -> LrcDocument:
    return parse_lines(text.splitlines())


def parse_lrc_with_stats(text: str) -> tuple[LrcDocument, LrcParseStats]:
    # CLI diagnostics
    return _scan(text.splitlines())
