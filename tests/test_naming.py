"""Tests for item classification and stem decoding."""

from pathlib import Path

import pytest

from manual_assembler.errors import ErrorCategory, MalformedStemError
from manual_assembler.kinds import ItemKind, is_kind_marker
from manual_assembler.naming import (
    ItemNameStyle,
    decode_path,
    decode_stem,
    item_display_name,
    section_display_name,
)


class TestItemKind:
    """Tests for kind-char classification."""

    @pytest.mark.parametrize("char", ["S", "T", "s", "t"])
    def test_tool_chars(self, char):
        assert ItemKind.from_char(char) is ItemKind.TOOL

    @pytest.mark.parametrize("char", ["X", "x"])
    def test_texture_chars(self, char):
        assert ItemKind.from_char(char) is ItemKind.TEXTURE

    @pytest.mark.parametrize("char", ["A", "n", "1", "_", "é"])
    def test_everything_else_is_regular(self, char):
        assert ItemKind.from_char(char) is ItemKind.REGULAR

    def test_markers(self):
        assert is_kind_marker("S")
        assert is_kind_marker("x")
        assert not is_kind_marker("A")

    def test_string_values(self):
        assert ItemKind.TOOL.value == "tool"
        assert ItemKind("texture") is ItemKind.TEXTURE


class TestDecodeStem:
    """Tests for splitting a stem into kind and remainder."""

    def test_tool_with_s(self):
        assert decode_stem("Sfoo") == (ItemKind.TOOL, "foo")

    def test_tool_with_t(self):
        assert decode_stem("Tbar") == (ItemKind.TOOL, "bar")

    def test_texture(self):
        assert decode_stem("Xtex") == (ItemKind.TEXTURE, "tex")

    def test_regular_keeps_first_letter(self):
        assert decode_stem("normal_name") == (ItemKind.REGULAR, "normal_name")

    def test_ordering_prefix_is_skipped(self):
        assert decode_stem("1_alpha") == (ItemKind.REGULAR, "alpha")
        assert decode_stem("02-beta") == (ItemKind.REGULAR, "beta")

    def test_marker_then_prefix(self):
        assert decode_stem("S_3_move") == (ItemKind.TOOL, "move")

    def test_lowercase_marker(self):
        assert decode_stem("xtexture_browser") == (ItemKind.TEXTURE, "texture_browser")

    def test_empty_stem_raises(self):
        with pytest.raises(MalformedStemError) as exc_info:
            decode_stem("")
        assert exc_info.value.category is ErrorCategory.VALIDATION

    @pytest.mark.parametrize("stem", ["S", "123", "S_42", "__"])
    def test_no_alphabetic_text_raises(self, stem):
        with pytest.raises(MalformedStemError) as exc_info:
            decode_stem(stem)
        assert exc_info.value.stem == stem


class TestDecodePath:
    """Tests for decoding file and directory paths."""

    def test_extension_is_ignored(self):
        assert decode_path(Path("manual/2_tools/Sselect.md")) == (ItemKind.TOOL, "select")

    def test_directory_name(self):
        assert decode_path(Path("manual/1_getting_started")) == (
            ItemKind.REGULAR,
            "getting_started",
        )

    def test_error_carries_path(self):
        with pytest.raises(MalformedStemError) as exc_info:
            decode_path(Path("manual/1_basics/42.md"))
        assert exc_info.value.context.path == str(Path("manual/1_basics/42.md"))


class TestDisplayNames:
    """Tests for section and item display names."""

    def test_section_name_decoding(self):
        assert section_display_name("normal_name") == "Normal name"

    def test_section_name_already_capitalised(self):
        assert section_display_name("A_one") == "A one"

    def test_section_name_keeps_inner_case(self):
        assert section_display_name("vertex_UV_tool") == "Vertex UV tool"

    def test_item_name_raw_by_default(self):
        assert item_display_name("first_steps") == "first_steps"

    def test_item_name_decoded(self):
        assert item_display_name("first_steps", ItemNameStyle.DECODED) == "First steps"
