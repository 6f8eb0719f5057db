"""Tests for tools_cli.py argument parsing, value conversion and dispatch."""
import inspect
from typing import Any, List, Union

import pytest

from tools_cli import call_tool, convert_value, parse_cli_params, unescape_shell_chars


class TestUnescapeShellChars:
    """Test cases for unescape_shell_chars function."""

    def test_unescape_exclamation_mark_in_range(self):
        """Sheet ranges typed in bash usually arrive with an escaped !."""
        assert unescape_shell_chars(r"'Sheet Name'\!A1:Z100") == "'Sheet Name'!A1:Z100"

    def test_mixed_escapes(self):
        assert unescape_shell_chars(r"\!\$\#\`") == "!$#`"

    def test_quotes(self):
        assert unescape_shell_chars(r"\"a\" \'b\'") == "\"a\" 'b'"

    def test_double_backslash_becomes_single(self):
        assert unescape_shell_chars(r"path\\to") == "path\\to"

    def test_non_string_returns_unchanged(self):
        assert unescape_shell_chars(None) is None
        assert unescape_shell_chars(123) == 123


class TestParseCliParams:
    """Test cases for turning leftover argv into keyword arguments."""

    def test_name_value_pairs(self):
        params = parse_cli_params(["--documentId", "doc123", "--content", "Hello"])
        assert params == {"documentId": "doc123", "content": "Hello"}

    def test_flag_without_value(self):
        assert parse_cli_params(["--dryRun", "--range", "A1"]) == {"dryRun": True, "range": "A1"}

    def test_values_are_unescaped(self):
        assert parse_cli_params(["--range", r"Sheet1\!A1"]) == {"range": "Sheet1!A1"}

    def test_stray_positional_ignored(self):
        assert parse_cli_params(["stray", "--slideIndex", "2"]) == {"slideIndex": "2"}


class TestConvertValue:
    """Test cases for annotation-driven conversion."""

    def test_int(self):
        assert convert_value("2", int) == 2

    def test_str_kept(self):
        assert convert_value("[1]", str) == "[1]"

    def test_union_parses_json(self):
        assert convert_value('[["a", 1]]', Union[str, List[List[Any]]]) == [["a", 1]]

    def test_union_keeps_invalid_json(self):
        assert convert_value("[oops", Union[str, List[List[Any]]]) == "[oops"

    def test_unannotated_passthrough(self):
        assert convert_value("x", inspect.Parameter.empty) == "x"

    def test_flag_passthrough(self):
        assert convert_value(True, int) is True


class TestCallTool:
    """Test cases for dispatching to a registered tool."""

    @pytest.mark.asyncio
    async def test_converts_and_invokes(self):
        received = {}

        async def rewrite_slide(presentationId: str, title: str, content: str, slideIndex: int = 0) -> str:
            received.update(presentationId=presentationId, title=title, content=content, slideIndex=slideIndex)
            return "ok"

        result = await call_tool(
            {"rewrite_slide": rewrite_slide},
            "rewrite_slide",
            {"presentationId": "p1", "title": "T", "content": "C", "slideIndex": "1"},
        )

        assert result == "ok"
        assert received["slideIndex"] == 1

    @pytest.mark.asyncio
    async def test_unwraps_registered_tool_objects(self):
        async def get_document(documentId: str) -> str:
            return f"doc:{documentId}"

        class FakeTool:
            fn = staticmethod(get_document)

        assert await call_tool({"get_document": FakeTool()}, "get_document", {"documentId": "d"}) == "doc:d"

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        with pytest.raises(ValueError, match="not found"):
            await call_tool({}, "missing_tool", {})
