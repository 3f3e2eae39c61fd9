"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest
import structlog

from manual_assembler.logging import HANDLER_NAME


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any configure_logging() call made during a test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

    root = logging.getLogger()
    for handler in root.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def make_manual(tmp_path):
    """Factory building a manual tree from ``{section: {item: text}}``.

    ``{"B_two": {}}`` creates an empty section.
    """

    def _make(layout: dict[str, dict[str, str]], root: Path | None = None) -> Path:
        root = root or tmp_path / "manual"
        root.mkdir(parents=True, exist_ok=True)
        for section, items in layout.items():
            section_dir = root / section
            section_dir.mkdir()
            for item, text in items.items():
                (section_dir / item).write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_manual(make_manual):
    """A small manual with regular, tool and texture entries."""
    return make_manual({
        "1_getting_started": {
            "1_introduction.md": "Welcome to the editor.",
            "2_first_steps.md": "Open a map.\n\nSave it.",
        },
        "2_tools": {
            "Sselect.md": "Selects brushes.",
            "Tvertex_tool.md": "Edits vertices.",
        },
        "Xtextures": {
            "1_texture_browser.md": "Browse <textures> & pick.",
        },
    })


class CallRecorder:
    """Formatter that records every callback and writes a trace."""

    def __init__(self):
        self.calls = []

    def section_start(self, output, is_last):
        self.calls.append(("start", is_last))
        output.write("[")

    def section_name(self, output, name, kind):
        self.calls.append(("name", name, kind))
        output.write(name)

    def item(self, output, name, path, kind):
        self.calls.append(("item", name, path, kind))
        output.write(f"({name})")

    def section_end(self, output):
        self.calls.append(("end",))
        output.write("]")


@pytest.fixture
def recorder():
    return CallRecorder()
