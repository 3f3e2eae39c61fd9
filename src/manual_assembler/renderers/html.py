"""
HTML renderer.

Sections become ``<section>`` elements, items become ``<article>``
elements, and the assembled body is wrapped in the ``manual.html`` page
template together with a navigation list of all sections.
"""

import html
import re
from dataclasses import dataclass
from pathlib import Path


from manual_assembler.kinds import ItemKind
from manual_assembler.output import ManualOutput
from manual_assembler.renderers.base import BaseRenderer

_SLUG_RE = re.compile(r"[^a-z0-9]+")

# Item files with these suffixes are embedded verbatim
RAW_HTML_SUFFIXES = {".html", ".htm"}


def slugify(text: str) -> str:
    """Lower-case anchor id: runs of non-alphanumerics become one dash."""
    return _SLUG_RE.sub("-", text.lower()).strip("-") or "section"


@dataclass
class NavEntry:
    """One navigation link."""

    anchor: str
    name: str
    kind: str


class HtmlRenderer(BaseRenderer):
    """Render the manual as a single HTML page.

    Features:
        - Anchor ids for every section and item, unique within the page
        - ``kind-regular`` / ``kind-tool`` / ``kind-texture`` CSS classes
        - Item text is escaped and split into paragraphs; ``.html`` items
          are embedded as-is

    Tags:
        - renderer
        - html
        - jinja2
    """

    format_name = "html"
    template_name = "manual.html"

    def reset(self) -> None:
        super().reset()
        self.nav: list[NavEntry] = []
        self._anchors: set[str] = set()
        self._section_anchor = ""

    def _unique_anchor(self, base: str) -> str:
        anchor = base
        counter = 2
        while anchor in self._anchors:
            anchor = f"{base}-{counter}"
            counter += 1
        self._anchors.add(anchor)
        return anchor

    def section_start(self, output: ManualOutput, is_last: bool) -> None:
        super().section_start(output, is_last)
        output.write('<section class="manual-section">\n')

    def section_name(self, output: ManualOutput, name: str, kind: ItemKind) -> None:
        self._section_anchor = self._unique_anchor(slugify(name))
        self.nav.append(NavEntry(anchor=self._section_anchor, name=name, kind=kind.value))
        output.write(
            f'<h2 id="{self._section_anchor}" class="kind-{kind.value}">{html.escape(name)}</h2>\n'
        )

    def item(self, output: ManualOutput, name: str, path: Path, kind: ItemKind) -> None:
        anchor = self._unique_anchor(f"{self._section_anchor}-{slugify(name)}")
        output.write(f'<article id="{anchor}" class="manual-item kind-{kind.value}">\n')
        output.write(f"<h3>{html.escape(name)}</h3>\n")

        body = self.read_item(path).strip()
        if path.suffix.lower() in RAW_HTML_SUFFIXES:
            output.write(f"{body}\n")
        else:
            for paragraph in re.split(r"\n\s*\n", body):
                if paragraph.strip():
                    output.write(f"<p>{html.escape(paragraph.strip())}</p>\n")

        output.write("</article>\n")

    def section_end(self, output: ManualOutput) -> None:
        output.write("</section>\n")
        if not self._is_last:
            output.write("<hr>\n")

    def finish(self, body: str) -> str:
        template = self._get_template()
        return template.render(
            body=body,
            nav=self.nav,
            **self._get_metadata(),
        )
