"""
Manual Assembler

Builds a complete manual from a directory tree of sections and items,
driving caller-supplied formatting callbacks in a fixed, sorted order.

Example:
    >>> from manual_assembler import ManualAssembler, MarkdownRenderer
    >>> assembler = ManualAssembler("docs/manual")
    >>> text = MarkdownRenderer().render(assembler)
"""

__version__ = "0.1.0"

from manual_assembler.assembler import (
    ManualAssembler,
    ManualFormatter,
    ManualItem,
    ManualSection,
    ManualTree,
    assemble,
)
from manual_assembler.builder import ManualBuilder
from manual_assembler.config import ManualConfig
from manual_assembler.errors import (
    MalformedStemError,
    ManualError,
    ManualNotFoundError,
    ManualSourceError,
)
from manual_assembler.kinds import ItemKind
from manual_assembler.naming import ItemNameStyle, decode_stem
from manual_assembler.output import ManualOutput
from manual_assembler.renderers import HtmlRenderer, MarkdownRenderer, TextRenderer

__all__ = [
    "ManualAssembler",
    "ManualFormatter",
    "ManualItem",
    "ManualSection",
    "ManualTree",
    "assemble",
    "ManualBuilder",
    "ManualConfig",
    "ManualError",
    "ManualSourceError",
    "ManualNotFoundError",
    "MalformedStemError",
    "ItemKind",
    "ItemNameStyle",
    "decode_stem",
    "ManualOutput",
    "HtmlRenderer",
    "MarkdownRenderer",
    "TextRenderer",
    "__version__",
]
