"""
Plain-text renderer for in-application help screens.
"""

import textwrap
from pathlib import Path

from manual_assembler.kinds import ItemKind
from manual_assembler.output import ManualOutput
from manual_assembler.renderers.base import BaseRenderer

SEPARATOR = "=" * 72


class TextRenderer(BaseRenderer):
    """Render the manual as plain text.

    Section titles are underlined, item names are followed by their body
    indented by ``indent`` spaces, and a separator line goes between
    sections (never after the last one).
    """

    format_name = "text"

    indent = 4

    def start_text(self) -> str:
        title = self.config.title.upper()
        return f"{title}\n{'=' * len(title)}\n\n"

    def section_name(self, output: ManualOutput, name: str, kind: ItemKind) -> None:
        label = self.kind_label(kind)
        heading = f"{name} [{label}]" if label else name
        output.write(f"{heading}\n{'-' * len(heading)}\n\n")

    def item(self, output: ManualOutput, name: str, path: Path, kind: ItemKind) -> None:
        label = self.kind_label(kind)
        output.write(f"{name} [{label}]\n" if label else f"{name}\n")

        body = self.read_item(path).strip()
        if body:
            output.write(textwrap.indent(body, " " * self.indent) + "\n")
        output.write("\n")

    def section_end(self, output: ManualOutput) -> None:
        if not self._is_last:
            output.write(f"{SEPARATOR}\n\n")
