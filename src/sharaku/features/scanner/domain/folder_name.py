"""Guess title and artist from a folder name."""

from __future__ import annotations

from dataclasses import dataclass

ARTIST_SEPARATOR = " - "


@dataclass(frozen=True, slots=True)
class ParsedMetadata:
    """Title/artist pair suggested for a discovered folder."""

    title: str
    artist: str | None = None


def _bracketed(folder_name: str) -> ParsedMetadata | None:
    if not folder_name.startswith("["):
        return None
    close = folder_name.find("]", 1)
    if close < 0:
        return None
    artist = folder_name[1:close].strip()
    title = folder_name[close + 1 :].strip()
    if not artist or not title:
        return None
    return ParsedMetadata(title=title, artist=artist)


def _dashed(folder_name: str) -> ParsedMetadata | None:
    artist, separator, title = folder_name.partition(ARTIST_SEPARATOR)
    if not separator:
        return None
    artist, title = artist.strip(), title.strip()
    if not artist or not title:
        return None
    return ParsedMetadata(title=title, artist=artist)


def parse_folder_name(folder_name: str) -> ParsedMetadata:
    """Parse ``[Artist] Title`` or ``Artist - Title``; otherwise the name is the title.

    A pattern whose artist or title part is blank does not match and the next
    rule is tried.
    """

    return (
        _bracketed(folder_name)
        or _dashed(folder_name)
        or ParsedMetadata(title=folder_name)
    )


__all__ = ["ARTIST_SEPARATOR", "ParsedMetadata", "parse_folder_name"]
