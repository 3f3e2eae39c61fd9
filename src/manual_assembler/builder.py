"""
Manual builder.

Runs the configured renderers over the manual source tree and writes one
output file per format.

Example:
    >>> builder = ManualBuilder(ManualConfig(manual_dir=Path("docs/manual")))
    >>> builder.build_all()
    {'markdown': 10342, 'html': 15881, 'text': 9120}
"""

from pathlib import Path

from manual_assembler.assembler import ManualAssembler, ManualTree
from manual_assembler.config import ManualConfig
from manual_assembler.errors import ManualError, RendererNotFoundError
from manual_assembler.logging import LogContext, get_logger
from manual_assembler.renderers import (
    BaseRenderer,
    HtmlRenderer,
    MarkdownRenderer,
    TextRenderer,
)

logger = get_logger(__name__)


class ManualBuilder:
    """Build every configured output format of the manual.

    Architecture:
        ```
        ManualBuilder
              │
              ├──► For each format:
              │         │
              │         ├──► Renderer.render(assembler)
              │         │
              │         └──► Write to output_dir/OUTPUT_FILES[format]
              │
              └──► Return {format: bytes written}
        ```

    Guardrails:
        - Do NOT keep going after a source error
          ✅ ManualError propagates; nothing further is written
    """

    # Map format to renderer class
    RENDERERS: dict[str, type[BaseRenderer]] = {
        "markdown": MarkdownRenderer,
        "html": HtmlRenderer,
        "text": TextRenderer,
    }

    # Map format to output filename
    OUTPUT_FILES = {
        "markdown": "manual.md",
        "html": "manual.html",
        "text": "manual.txt",
    }

    def __init__(self, config: ManualConfig | None = None):
        self.config = config or ManualConfig()
        self.assembler = ManualAssembler(self.config.manual_dir, self.config.item_names)

    def scan(self) -> ManualTree:
        """Scan the manual source tree without rendering."""
        return self.assembler.scan()

    def get_renderer(self, fmt: str) -> BaseRenderer:
        if fmt not in self.RENDERERS:
            raise RendererNotFoundError(fmt)
        return self.RENDERERS[fmt](self.config)

    def render(self, fmt: str) -> str:
        """Render a single format and return its content."""
        renderer = self.get_renderer(fmt)
        with LogContext(manual_dir=str(self.config.manual_dir), format=fmt):
            return renderer.render(self.assembler)

    def output_path(self, fmt: str) -> Path:
        return self.config.output_dir / self.OUTPUT_FILES.get(fmt, f"manual.{fmt}")

    def build_all(self, formats: list[str] | None = None) -> dict[str, int]:
        """Render and write the requested formats.

        Args:
            formats: Formats to build (config.formats if None)

        Returns:
            Dict mapping format to bytes written

        Raises:
            RendererNotFoundError: unknown format
            ManualError: the manual source cannot be assembled
        """
        formats = formats or list(self.config.formats)
        for fmt in formats:
            if fmt not in self.RENDERERS:
                raise RendererNotFoundError(fmt)

        rendered = {}
        for fmt in formats:
            logger.info("render_started", format=fmt)
            try:
                rendered[fmt] = self.render(fmt)
            except ManualError as e:
                logger.error("render_failed", format=fmt, **e.to_dict())
                raise

        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        results = {}
        for fmt, content in rendered.items():
            output_file = self.output_path(fmt)
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(content, encoding="utf-8")

            size = len(content.encode("utf-8"))
            results[fmt] = size
            logger.info("output_written", format=fmt, path=str(output_file), bytes=size)

        return results
