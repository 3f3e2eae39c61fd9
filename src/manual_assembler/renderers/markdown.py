"""
Markdown renderer.

Produces a single Markdown document: the manual title, one ``##`` heading
per section and one ``###`` heading per item followed by the item's text.
"""

from pathlib import Path

from manual_assembler.kinds import ItemKind
from manual_assembler.output import ManualOutput
from manual_assembler.renderers.base import BaseRenderer


class MarkdownRenderer(BaseRenderer):
    """Render the manual as one Markdown file.

    Features:
        - Tool and texture entries get an italic kind marker
        - Sections are separated by horizontal rules, none after the last
        - Item bodies are embedded as written

    Tags:
        - renderer
        - markdown
    """

    format_name = "markdown"

    def start_text(self) -> str:
        lines = [f"# {self.config.title}", ""]
        metadata = self._get_metadata()
        if metadata["generated_at"] is not None:
            lines.extend([
                f"*Generated on {metadata['generated_at'].strftime('%Y-%m-%d')}*",
                "",
            ])
        return "\n".join(lines) + "\n"

    def _heading(self, level: int, name: str, kind: ItemKind) -> str:
        label = self.kind_label(kind)
        suffix = f" *({label})*" if label else ""
        return f"{'#' * level} {name}{suffix}\n\n"

    def section_name(self, output: ManualOutput, name: str, kind: ItemKind) -> None:
        output.write(self._heading(2, name, kind))

    def item(self, output: ManualOutput, name: str, path: Path, kind: ItemKind) -> None:
        output.write(self._heading(3, name, kind))
        body = self.read_item(path).strip()
        if body:
            output.write(f"{body}\n\n")

    def section_end(self, output: ManualOutput) -> None:
        if not self._is_last:
            output.write("---\n\n")
