"""
Stem decoding for manual sections and items.

A stem is ``<kind-char><rest>``. The kind-char selects the ``ItemKind``;
the display text starts at the first alphabetic character of what follows.

Examples:
    >>> decode_stem("Sfoo")
    (<ItemKind.TOOL: 'tool'>, 'foo')
    >>> decode_stem("1_alpha")
    (<ItemKind.REGULAR: 'regular'>, 'alpha')
    >>> section_display_name(decode_stem("normal_name")[1])
    'Normal name'
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from manual_assembler.errors import MalformedStemError
from manual_assembler.kinds import ItemKind, is_kind_marker


class ItemNameStyle(str, Enum):
    """How item display names are derived from the stem remainder."""

    RAW = "raw"
    DECODED = "decoded"


def decode_stem(stem: str) -> tuple[ItemKind, str]:
    """Split a stem into its kind and display remainder.

    A leading kind marker (S, T or X in any case) is consumed. Anything
    before the first alphabetic character of what is left is skipped, so
    ordering prefixes such as ``01_`` never reach the display name.

    Raises:
        MalformedStemError: stem is empty or has no alphabetic text
    """
    if not stem:
        raise MalformedStemError(stem, "Manual entry has an empty name")

    kind = ItemKind.from_char(stem[0])
    rest = stem[1:] if is_kind_marker(stem[0]) else stem

    for index, char in enumerate(rest):
        if char.isalpha():
            return kind, rest[index:]

    raise MalformedStemError(stem)


def decode_path(path: Path) -> tuple[ItemKind, str]:
    """Decode the stem of a section directory or item file."""
    try:
        return decode_stem(path.stem)
    except MalformedStemError as e:
        e.with_context(path=path)
        raise


def section_display_name(remainder: str) -> str:
    """Underscores become spaces and the first letter is upper-cased."""
    text = remainder.replace("_", " ")
    return text[:1].upper() + text[1:]


def item_display_name(remainder: str, style: ItemNameStyle = ItemNameStyle.RAW) -> str:
    if style is ItemNameStyle.DECODED:
        return section_display_name(remainder)
    return remainder


__all__ = [
    "ItemNameStyle",
    "decode_stem",
    "decode_path",
    "section_display_name",
    "item_display_name",
]
