import pytest

from lrc2ass.errors import TimingOrderError
from lrc2ass.lrc.model import Lyrics, LyricsTiming
from lrc2ass.lrc.parse import parse_lrc
from lrc2ass.lrc.timing import build_lyrics


def test_no_timings_gives_empty_lyrics():
    assert build_lyrics(parse_lrc("[ti:Nothing here]\n")) == Lyrics()


def test_durations_run_until_next_timing():
    lyrics = build_lyrics(parse_lrc("[00:00.00]a[00:01.00]b[00:03.00]"))
    assert lyrics.timings[0] == LyricsTiming(0, 0, 0, 0, 0)  # sentinel
    assert [t.duration_ms for t in lyrics.timings[1:]] == [1000, 2000, 0]
    assert lyrics.lines == ("ab",)


def test_sentinel_covers_time_before_first_timing():
    lyrics = build_lyrics(parse_lrc("[00:04.20]x"))
    assert lyrics.timings == (
        LyricsTiming(0, 4200, 0, 0, 0),
        LyricsTiming(4200, 0, 0, 0, 1),
    )


def test_line_indexes_are_compacted():
    text = "[ti:Song]\n[00:01.00]ab[00:02.00]\n\n[00:03.00]cd[00:04.00]\n"
    lyrics = build_lyrics(parse_lrc(text))
    assert lyrics.lines == ("ab", "cd")
    assert [t.line_index for t in lyrics.timings] == [0, 0, 0, 1, 1]
    assert [t.duration_ms for t in lyrics.timings] == [1000, 1000, 1000, 1000, 0]


def test_line_with_timestamps_but_no_text_keeps_its_slot():
    lyrics = build_lyrics(parse_lrc("[00:01.00]ab[00:02.00]\n[00:03.00]\n[00:04.00]cd\n"))
    assert lyrics.lines == ("ab", "", "cd")
    assert max(t.line_index for t in lyrics.timings) == len(lyrics.lines) - 1


def test_line_indexes_never_decrease():
    text = "\n".join(f"[00:{i:02d}.00]w{i}[00:{i:02d}.50]" for i in range(10))
    lyrics = build_lyrics(parse_lrc(text))
    indexes = [t.line_index for t in lyrics.timings]
    assert indexes == sorted(indexes)
    assert len(lyrics.lines) == 10


def test_equal_timestamps_give_zero_duration():
    lyrics = build_lyrics(parse_lrc("[00:01.00]a[00:01.00]b[00:02.00]"))
    assert [t.duration_ms for t in lyrics.timings] == [1000, 0, 1000, 0]


def test_out_of_order_timestamps_are_rejected():
    with pytest.raises(TimingOrderError, match="earlier"):
        build_lyrics(parse_lrc("[00:02.00]a[00:01.00]b"))


def test_offset_can_reorder_timestamps():
    with pytest.raises(TimingOrderError):
        build_lyrics(parse_lrc("[00:05.00]a\n[offset:-3000]\n[00:06.00]b\n"))
