from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PRIMARY_COLOR = "FFFFFF"
DEFAULT_SECONDARY_COLOR = "EF8800"
DEFAULT_LONG_TEXT_SECONDARY_COLOR = "00C8FF"


def convert_color_to_ass(color: str) -> str:
    """
    [AA]RRGGBB -> AABBGGRR, upper-cased. Alpha defaults to 00.

    Expects well-formed hex; see lrc2ass.config.validate_color.
    """
    if len(color) == 6:
        aa, rgb = "00", color
    else:
        aa, rgb = color[:2], color[2:]
    return f"{aa}{rgb[4:6]}{rgb[2:4]}{rgb[0:2]}".upper()


@dataclass(frozen=True, slots=True)
class SubtitleStyle:
    # all in [AA]RRGGBB
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    long_text_secondary_color: str = DEFAULT_LONG_TEXT_SECONDARY_COLOR


@dataclass(frozen=True, slots=True)
class AssSubtitleStyle:
    # all in AABBGGRR
    primary_color: str
    secondary_color: str
    long_text_secondary_color: str

    @classmethod
    def from_style(cls, style: SubtitleStyle) -> "AssSubtitleStyle":
        return cls(
            primary_color=convert_color_to_ass(style.primary_color),
            secondary_color=convert_color_to_ass(style.secondary_color),
            long_text_secondary_color=convert_color_to_ass(style.long_text_secondary_color),
        )
