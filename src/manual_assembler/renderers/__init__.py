"""
Renderers module for manual output.

Each renderer implements the assembler's four formatting callbacks for one
output format.
"""

from manual_assembler.renderers.base import BaseRenderer
from manual_assembler.renderers.html import HtmlRenderer
from manual_assembler.renderers.markdown import MarkdownRenderer
from manual_assembler.renderers.text import TextRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "TextRenderer",
]
