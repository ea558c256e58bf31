from __future__ import annotations

from pathlib import Path
import typer

from lrc2ass.app import convert_file, read_lrc_file
from lrc2ass.config import load_config, save_config_colors, validate_color
from lrc2ass.errors import ConversionError
from lrc2ass.logging_setup import setup_logging
from lrc2ass.lrc.export import export_json
from lrc2ass.lrc.parse import parse_lrc_with_stats
from lrc2ass.lrc.timing import build_lyrics
from lrc2ass.style import SubtitleStyle


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _color_option(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return validate_color(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def convert(
    lrc_path: Path,
    out: Path | None = typer.Option(None, "--out", "-o", help="Output .ass file (default: next to input)"),
    primary: str | None = typer.Option(
        None, "--primary", callback=_color_option, help="Highlighted text color, [AA]RRGGBB"
    ),
    secondary: str | None = typer.Option(
        None, "--secondary", callback=_color_option, help="Not yet highlighted text color, [AA]RRGGBB"
    ),
    long_secondary: str | None = typer.Option(
        None, "--long-secondary", callback=_color_option, help="Color for held syllables (>= 0.7s), [AA]RRGGBB"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings and errors"),
):
    """
    Convert a syllable-timed LRC file into an ASS karaoke subtitle.
    """
    setup_logging(debug, quiet)
    cfg = load_config()
    style = SubtitleStyle(
        primary_color=primary or cfg.primary_color,
        secondary_color=secondary or cfg.secondary_color,
        long_text_secondary_color=long_secondary or cfg.long_text_secondary_color,
    )
    dst = out or lrc_path.with_suffix(".ass")
    if out is None and dst == lrc_path:
        typer.echo(f"Error: {lrc_path} already has the .ass suffix, pass --out to choose the output file", err=True)
        raise typer.Exit(code=1)
    try:
        summary = convert_file(lrc_path, dst, style)
    except ConversionError as e:
        typer.echo(f"Error: converting {lrc_path} failed: {e}", err=True)
        raise typer.Exit(code=1)
    if not quiet:
        typer.echo(f"{summary.output_path} ({summary.dialogue_events} lines)")


@app.command()
def parse(
    lrc_path: Path,
    json_output: bool = typer.Option(False, "--json", help="Print normalized timings as JSON"),
):
    """Parse LRC and print stats."""
    try:
        lines = read_lrc_file(lrc_path)
        doc, stats = parse_lrc_with_stats("\n".join(lines))
        lyrics = build_lyrics(doc)
    except ConversionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(export_json(lyrics))
        return
    typer.echo(f"lines_total={stats.lines_total}")
    typer.echo(f"lines_with_timestamps={stats.lines_with_timestamps}")
    typer.echo(f"lines_ignored={stats.lines_ignored}")
    typer.echo(f"timings_total={stats.timings_total}")
    typer.echo(f"lyric_lines={len(lyrics.lines)}")
    typer.echo(f"offset_ms={stats.offset_ms}")
    typer.echo(f"metadata={doc.metadata}")


@app.command()
def config(
    primary: str | None = typer.Option(None, "--primary", callback=_color_option, help="Default primary color"),
    secondary: str | None = typer.Option(None, "--secondary", callback=_color_option, help="Default secondary color"),
    long_secondary: str | None = typer.Option(
        None, "--long-secondary", callback=_color_option, help="Default long-syllable color"
    ),
):
    """
    Save default colors, or show the effective ones when no option is given.
    """
    if primary or secondary or long_secondary:
        path = save_config_colors(
            primary_color=primary,
            secondary_color=secondary,
            long_text_secondary_color=long_secondary,
        )
        typer.echo(f"Config saved: {path}")
        return

    cfg = load_config()
    typer.echo(f"primary_color={cfg.primary_color}")
    typer.echo(f"secondary_color={cfg.secondary_color}")
    typer.echo(f"long_text_secondary_color={cfg.long_text_secondary_color}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
