"""Terminal report for a single manga.

format_report() is pure; print_report() writes it through the shared
console.
"""

from rich.console import Console

from models.models import MangaAttributes
from utils.text import clean_html

# Lines are written to console.file unrendered
console = Console()

BORDER = "=" * 39
SEPARATOR = "-" * 39


def _field(label: str, value: object) -> str:
    return f"{label:<18}: {value}"


def format_report(manga: MangaAttributes) -> list[str]:
    """Build the report lines for a manga record.

    Optional lines are skipped when the value is empty or not positive.
    """
    lines = [BORDER, _field("Title", manga.canonical_title)]
    if manga.abbreviated_title:
        lines.append(_field("Short Title", manga.abbreviated_title))
    if manga.chapter_count > 0:
        lines.append(_field("Chapters", manga.chapter_count))
    if manga.volume_count > 0:
        lines.append(_field("Volumes", manga.volume_count))
    if manga.average_rating:
        lines.append(_field("Average Rating", manga.average_rating))
    if manga.popularity_rank > 0:
        lines.append(_field("Popularity Rank", manga.popularity_rank))

    lines += [
        SEPARATOR,
        "Synopsis:",
        clean_html(manga.synopsis),
        SEPARATOR,
        _field("Cover Image", manga.poster_image.medium),
        BORDER,
    ]
    return lines


def print_line(text: str) -> None:
    """Write one line to stdout exactly as given."""
    console.file.write(f"{text}\n")


def print_report(manga: MangaAttributes) -> None:
    """Print the full report for a manga record."""
    for line in format_report(manga):
        print_line(line)
