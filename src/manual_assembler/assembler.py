"""
Manual assembler core.

Walks the manual source tree (one directory per section, one file per item),
decodes the classification encoded in every name, and drives four
formatting callbacks to build a single output string.

Manifesto:
    The assembler owns ordering and decoding, nothing else. It never reads
    item contents and never decides markup: the callbacks do. Given the same
    tree it always makes the same calls in the same order.

Architecture:
    ::

        manual_dir/
          ├── 1_basics/          ──►  section_start(out, is_last=False)
          │     ├── 1_intro.md          section_name(out, "Basics", REGULAR)
          │     └── Sselect.md          item(out, "intro", path, REGULAR)
          │                             item(out, "select", path, TOOL)
          │                             section_end(out)
          └── Xtextures/         ──►  section_start(out, is_last=True)
                                        ...

        scan()  ─►  ManualTree (sorted snapshot)  ─►  callbacks  ─►  str

Guardrails:
    - The whole tree is listed and sorted before the first callback runs
    - Any listing failure raises ManualSourceError; no partial output
    - Undecodable names raise MalformedStemError; they are data defects

Tags:
    assembler, manual, callbacks, core
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from manual_assembler.errors import (
    ErrorContext,
    ManualNotFoundError,
    ManualSourceError,
)
from manual_assembler.kinds import ItemKind
from manual_assembler.logging import get_logger
from manual_assembler.naming import (
    ItemNameStyle,
    decode_path,
    item_display_name,
    section_display_name,
)
from manual_assembler.output import ManualOutput

logger = get_logger(__name__)

DEFAULT_MANUAL_DIR = Path("docs/manual")

SectionStartFn = Callable[[ManualOutput, bool], None]
SectionNameFn = Callable[[ManualOutput, str, ItemKind], None]
ItemFn = Callable[[ManualOutput, str, Path, ItemKind], None]
SectionEndFn = Callable[[ManualOutput], None]


@dataclass(frozen=True)
class ManualItem:
    """A single manual entry file."""

    path: Path
    name: str
    kind: ItemKind


@dataclass(frozen=True)
class ManualSection:
    """A section directory with its items in processing order."""

    path: Path
    name: str
    kind: ItemKind
    items: tuple[ManualItem, ...]


@dataclass(frozen=True)
class ManualTree:
    """Sorted snapshot of the manual source tree."""

    root: Path
    sections: tuple[ManualSection, ...]

    @property
    def item_count(self) -> int:
        return sum(len(section.items) for section in self.sections)


@runtime_checkable
class ManualFormatter(Protocol):
    """The four formatting callbacks as one object.

    Equivalent to passing the bound methods to ``assemble()``.
    """

    def section_start(self, output: ManualOutput, is_last: bool) -> None:
        ...

    def section_name(self, output: ManualOutput, name: str, kind: ItemKind) -> None:
        ...

    def item(self, output: ManualOutput, name: str, path: Path, kind: ItemKind) -> None:
        ...

    def section_end(self, output: ManualOutput) -> None:
        ...


def _sorted_listing(directory: Path, context: ErrorContext) -> list[Path]:
    """List ``directory`` and sort the entries lexicographically by path."""
    try:
        paths = list(directory.iterdir())
    except FileNotFoundError as e:
        if context.section is None:
            raise ManualNotFoundError(directory, cause=e) from e
        raise ManualSourceError(
            f"Manual section disappeared: {directory}", context=context, cause=e
        ) from e
    except OSError as e:
        raise ManualSourceError(
            f"Cannot read manual directory {directory}: {e.strerror or e}",
            context=context,
            cause=e,
        ) from e

    return sorted(paths)


class ManualAssembler:
    """
    Assemble a manual from its on-disk source tree.

    Examples:
        >>> assembler = ManualAssembler("docs/manual")
        >>> tree = assembler.scan()
        >>> text = assembler.assemble("# Manual\\n", MarkdownRenderer())

    Performance:
        - One directory listing per section plus the root listing
        - Output is built in a single ManualOutput, joined once
    """

    def __init__(
        self,
        manual_dir: Path | str = DEFAULT_MANUAL_DIR,
        item_names: ItemNameStyle | str = ItemNameStyle.RAW,
    ):
        self.manual_dir = Path(manual_dir)
        self.item_names = ItemNameStyle(item_names)

    def scan(self) -> ManualTree:
        """List, decode and sort the whole tree.

        Raises:
            ManualNotFoundError: manual_dir does not exist
            ManualSourceError: manual_dir or a section cannot be listed
            MalformedStemError: a section or item name cannot be decoded
        """
        root_context = ErrorContext(manual_dir=str(self.manual_dir))
        sections = []

        for section_path in _sorted_listing(self.manual_dir, root_context):
            kind, remainder = decode_path(section_path)
            section_context = ErrorContext(
                manual_dir=str(self.manual_dir),
                section=section_path.name,
                path=str(section_path),
            )

            items = []
            for item_path in _sorted_listing(section_path, section_context):
                item_kind, item_remainder = decode_path(item_path)
                items.append(
                    ManualItem(
                        path=item_path,
                        name=item_display_name(item_remainder, self.item_names),
                        kind=item_kind,
                    )
                )

            logger.debug(
                "section_scanned",
                section=section_path.name,
                kind=kind.value,
                items=len(items),
            )
            sections.append(
                ManualSection(
                    path=section_path,
                    name=section_display_name(remainder),
                    kind=kind,
                    items=tuple(items),
                )
            )

        return ManualTree(root=self.manual_dir, sections=tuple(sections))

    def assemble(self, start_text: str, formatter: ManualFormatter) -> str:
        """Assemble the manual through a formatter object."""
        return self.assemble_with(
            start_text,
            formatter.section_start,
            formatter.section_name,
            formatter.item,
            formatter.section_end,
        )

    def assemble_with(
        self,
        start_text: str,
        on_section_start: SectionStartFn,
        on_section_name: SectionNameFn,
        on_item: ItemFn,
        on_section_end: SectionEndFn,
    ) -> str:
        """Assemble the manual through four callbacks.

        Per section, in path order: ``on_section_start(output, is_last)``,
        ``on_section_name(output, name, kind)``, ``on_item(output, name,
        path, kind)`` for every file in path order, ``on_section_end(output)``.

        Returns:
            ``start_text`` followed by everything the callbacks wrote
        """
        tree = self.scan()
        output = ManualOutput(start_text)
        last_index = len(tree.sections) - 1

        for index, section in enumerate(tree.sections):
            on_section_start(output, index == last_index)
            on_section_name(output, section.name, section.kind)

            for item in section.items:
                on_item(output, item.name, item.path, item.kind)

            on_section_end(output)

        logger.info(
            "manual_assembled",
            manual_dir=str(self.manual_dir),
            sections=len(tree.sections),
            items=tree.item_count,
            length=len(output),
        )
        return output.getvalue()


def assemble(
    start_text: str,
    on_section_start: SectionStartFn,
    on_section_name: SectionNameFn,
    on_item: ItemFn,
    on_section_end: SectionEndFn,
    manual_dir: Path | str = DEFAULT_MANUAL_DIR,
    item_names: ItemNameStyle | str = ItemNameStyle.RAW,
) -> str:
    """Assemble the manual at ``manual_dir`` through four callbacks.

    Example:
        >>> text = assemble(
        ...     "",
        ...     lambda out, last: None,
        ...     lambda out, name, kind: out.write(f"# {name}\\n"),
        ...     lambda out, name, path, kind: out.write(f"- {name}\\n"),
        ...     lambda out: out.write("\\n"),
        ...     manual_dir="docs/manual",
        ... )
    """
    return ManualAssembler(manual_dir, item_names).assemble_with(
        start_text, on_section_start, on_section_name, on_item, on_section_end
    )


__all__ = [
    "DEFAULT_MANUAL_DIR",
    "ManualItem",
    "ManualSection",
    "ManualTree",
    "ManualFormatter",
    "ManualAssembler",
    "assemble",
]
