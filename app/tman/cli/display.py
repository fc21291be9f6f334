"""Listing output for the trash.

Glyphs and styles depend on the ``use_unicode`` and ``use_colors``
settings; with both off the output is plain ASCII.
"""

from rich.text import Text

from tman.core.config import Settings
from tman.models.index import Entry
from tman.utils.formatting import console

BULLET = ("•", "*")
LEFT_ARROW = ("←", "<-")
RIGHT_ARROW = ("→", "->")


def _glyph(settings: Settings, glyph: tuple[str, str]) -> str:
    return glyph[0] if settings.use_unicode else glyph[1]


def _style(settings: Settings, style: str) -> str:
    return style if settings.use_colors else ""


def format_entry(entry: Entry, settings: Settings) -> list[Text]:
    """Format one entry as a key line followed by its versions, newest first.

    Args:
        entry: Entry to format.
        settings: Display settings.

    Returns:
        Lines ready to print.
    """
    header = Text("  ")
    header.append(_glyph(settings, BULLET))
    header.append(" ")
    header.append(entry.name, style=_style(settings, "entry.name"))
    header.append(" ")
    header.append(_glyph(settings, LEFT_ARROW))
    header.append(" ")
    header.append(entry.origin, style=_style(settings, "entry.origin"))

    lines = [header]
    for version in reversed(entry.history):
        line = Text("    ")
        line.append(_glyph(settings, RIGHT_ARROW))
        line.append(" ")
        line.append(version, style=_style(settings, "entry.version"))
        lines.append(line)
    return lines


def print_listing(
    entries: list[Entry],
    settings: Settings,
    pattern: str | None = None,
    simple: bool = False,
) -> None:
    """Print the trash listing.

    Simple mode prints one name per line and nothing else, for scripting.

    Args:
        entries: Entries to show, already filtered.
        settings: Display settings.
        pattern: Filter the entries were selected with, for the header.
        simple: Use simple mode.
    """
    if simple:
        for entry in entries:
            console.print(entry.name, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    if pattern:
        _print_plain(f"Showing results for '{pattern}' in trash.")
    else:
        _print_plain("Showing results in trash.")

    for entry in entries:
        for line in format_entry(entry, settings):
            console.print(line, soft_wrap=True)

    if not entries:
        if pattern:
            _print_plain(f"No results for '{pattern}'.")
        else:
            _print_plain("Your trash is empty!")


def _print_plain(message: str) -> None:
    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)
