"""
Base renderer for manual output.

A renderer is a ``ManualFormatter``: it implements the four assembler
callbacks for one target markup, reads item files itself, and may wrap
the assembled body in a Jinja2 page template.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from manual_assembler.assembler import ManualAssembler
from manual_assembler.config import ManualConfig
from manual_assembler.errors import ErrorContext, ManualSourceError
from manual_assembler.kinds import ItemKind
from manual_assembler.logging import get_logger
from manual_assembler.output import ManualOutput

logger = get_logger(__name__)


class BaseRenderer(ABC):
    """Base class for manual renderers.

    Manifesto:
        The assembler decides order; renderers decide markup. A renderer
        never sorts, filters or decodes names, it only formats what it is
        handed, in the order it is handed.

    Architecture:
        ```
        render()
           │
           ├──► ManualAssembler.assemble(start_text(), self)
           │         │
           │         ├──► section_start / section_name
           │         ├──► item  ──► read_item(path)
           │         └──► section_end
           │
           └──► finish(body)  ──► Jinja2 page template (optional)
        ```

    Tags:
        - renderer
        - template
        - jinja2
    """

    # Output format name
    format_name: str = ""

    # Page template, if the format wraps its body
    template_name: str | None = None

    # Label appended to tool and texture headings
    KIND_LABELS = {
        ItemKind.TOOL: "tool",
        ItemKind.TEXTURE: "texture",
    }

    def __init__(
        self,
        config: ManualConfig | None = None,
        template_dir: Path | None = None,
    ):
        """Initialize the renderer.

        Args:
            config: Build configuration (defaults apply if omitted)
            template_dir: Directory containing templates
        """
        self.config = config or ManualConfig()

        if template_dir is None:
            template_dir = self.config.template_dir or Path(__file__).parent.parent / "templates"
        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self.reset()

    # ------------------------------------------------------------------
    # Assembler callbacks
    # ------------------------------------------------------------------

    def section_start(self, output: ManualOutput, is_last: bool) -> None:
        self._is_last = is_last

    @abstractmethod
    def section_name(self, output: ManualOutput, name: str, kind: ItemKind) -> None:
        pass

    @abstractmethod
    def item(self, output: ManualOutput, name: str, path: Path, kind: ItemKind) -> None:
        pass

    @abstractmethod
    def section_end(self, output: ManualOutput) -> None:
        pass

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def start_text(self) -> str:
        """Seed text placed before the first section."""
        return ""

    def finish(self, body: str) -> str:
        """Post-process the assembled body."""
        return body

    def reset(self) -> None:
        """Clear per-render state."""
        self._is_last = False

    def render(self, assembler: ManualAssembler | None = None) -> str:
        """Render the whole manual.

        Args:
            assembler: Assembler to drive (built from config if omitted)

        Returns:
            Rendered document content as string
        """
        if assembler is None:
            assembler = ManualAssembler(self.config.manual_dir, self.config.item_names)

        self.reset()
        body = assembler.assemble(self.start_text(), self)
        content = self.finish(body)
        logger.debug("manual_rendered", format=self.format_name, length=len(content))
        return content

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def read_item(self, path: Path) -> str:
        """Read an item file's text.

        Raises:
            ManualSourceError: the file cannot be read or decoded
        """
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManualSourceError(
                f"Cannot read manual item {path}",
                context=ErrorContext(
                    manual_dir=str(self.config.manual_dir),
                    section=path.parent.name,
                    path=str(path),
                ),
                cause=e,
            ) from e

    def kind_label(self, kind: ItemKind) -> str | None:
        return self.KIND_LABELS.get(kind)

    def _get_template(self, template_name: str | None = None):
        """Load a Jinja2 template (``self.template_name`` by default)."""
        name = template_name or self.template_name
        return self.env.get_template(name)

    def _get_metadata(self) -> dict[str, Any]:
        """Common metadata for templates."""
        return {
            "title": self.config.title,
            "generated_at": datetime.now() if self.config.include_timestamps else None,
            "format": self.format_name,
        }
