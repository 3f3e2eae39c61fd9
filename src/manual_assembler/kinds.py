"""
Manual item classification.

The first character of a section or item stem encodes what kind of entry it
is. STDLIB ONLY.
"""

from enum import Enum


class ItemKind(str, Enum):
    """
    Classification of a manual section or item.

    Closed set: every stem maps to exactly one kind. Renderers switch on it
    to pick icons, badges or CSS classes.

    Examples:
        >>> ItemKind.from_char("S")
        <ItemKind.TOOL: 'tool'>
        >>> ItemKind.from_char("x")
        <ItemKind.TEXTURE: 'texture'>
        >>> ItemKind.from_char("1")
        <ItemKind.REGULAR: 'regular'>
    """

    REGULAR = "regular"
    TOOL = "tool"
    TEXTURE = "texture"

    @classmethod
    def from_char(cls, char: str) -> "ItemKind":
        """Classify a kind-char, case-insensitively."""
        return _KIND_CHARS.get(char.upper(), cls.REGULAR)


_KIND_CHARS = {
    "S": ItemKind.TOOL,
    "T": ItemKind.TOOL,
    "X": ItemKind.TEXTURE,
}


def is_kind_marker(char: str) -> bool:
    """True if ``char`` is one of the classification markers."""
    return char.upper() in _KIND_CHARS


__all__ = ["ItemKind", "is_kind_marker"]
