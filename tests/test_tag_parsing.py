import pytest

from lrc2ass.errors import LrcFormatError
from lrc2ass.lrc.model import OffsetTag, TimeTag, UnknownTag
from lrc2ass.lrc.parse import parse_tag, parse_timestamp
from lrc2ass.render.ass import format_ass_time


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00:00.00", 0),
        ("00:01.00", 1000),
        ("01:02.34", 62340),
        ("01:02:03", 62030),
        ("99:59.99", 5999990),
        ("00:01.005", 1000),  # only the first 8 characters count
    ],
)
def test_parse_timestamp(text, expected):
    assert parse_timestamp(text) == expected


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("00:01.0", "too short"),
        ("0a:01.00", "minutes"),
        ("00-01.00", "seconds divider"),
        ("00:x1.00", "seconds"),
        ("00:01,00", "centiseconds divider"),
        ("00:01.-1", "centiseconds"),
        ("０0:01.00", "minutes"),
    ],
)
def test_parse_timestamp_rejects_bad_input(text, fragment):
    with pytest.raises(LrcFormatError, match=fragment):
        parse_timestamp(text)


@pytest.mark.parametrize("literal", ["00:00.00", "03:07.50", "12:34.56", "59:59.99"])
def test_timestamp_round_trips_through_ass_time(literal):
    mm, rest = literal.split(":")
    ss, cc = rest.split(".")
    assert format_ass_time(parse_timestamp(literal)) == f"0:{mm}:{ss}.{cc}"


def test_parse_tag_time():
    assert parse_tag("00:01.50") == TimeTag(1500)


@pytest.mark.parametrize(
    "content, expected",
    [
        ("offset:500", 500),
        ("offset:+250", 250),
        ("offset:-1500", -1500),
        ("offset:0", 0),
    ],
)
def test_parse_tag_offset(content, expected):
    assert parse_tag(content) == OffsetTag(expected)


def test_parse_tag_unknown_is_tolerated():
    assert parse_tag("ar:Someone") == UnknownTag("ar", "Someone")
    assert parse_tag("ti:a:b") == UnknownTag("ti", "a:b")
    assert parse_tag("length") == UnknownTag("length", "")


@pytest.mark.parametrize("content", ["", "offset", "offset:", "offset:abc", "offset:1.5", "offset: 5"])
def test_parse_tag_errors(content):
    with pytest.raises(LrcFormatError):
        parse_tag(content)
