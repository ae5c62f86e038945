"""End-to-end server tests."""

import pytest
import json

from tako.server import server, list_tools, call_tool


@pytest.mark.asyncio
async def test_server_lists_three_tools():
    """Test that server lists all 3 tools."""
    tools = await list_tools()

    assert len(tools) == 3

    names = {t.name for t in tools}
    assert names == {"get_symbols", "find_symbol", "get_syntax_tree"}


@pytest.mark.asyncio
async def test_find_symbol_tool_schema():
    """Test find_symbol tool has correct schema."""
    tools = await list_tools()

    find = next(t for t in tools if t.name == "find_symbol")

    assert "path" in find.inputSchema["properties"]
    assert "pattern" in find.inputSchema["properties"]
    assert set(find.inputSchema["required"]) == {"path", "pattern"}


@pytest.mark.asyncio
async def test_call_get_symbols(tmp_path):
    """Test get_symbols returns JSON text."""
    source = tmp_path / "main.go"
    source.write_text("// doc\nfunc F() {}\n")

    content = await call_tool("get_symbols", {"path": str(source)})
    result = json.loads(content[0].text)

    assert result["files"][0]["symbols"][0]["summary"] == "// doc\nfunc F()"


@pytest.mark.asyncio
async def test_call_get_syntax_tree(tmp_path):
    """Test get_syntax_tree honors max_depth."""
    source = tmp_path / "main.go"
    source.write_text("func F() {}\n")

    content = await call_tool("get_syntax_tree", {"path": str(source), "max_depth": 1})
    result = json.loads(content[0].text)

    assert len(result["lines"]) == 1


@pytest.mark.asyncio
async def test_call_unknown_tool():
    """Test unknown tools report an error instead of raising."""
    content = await call_tool("nope", {})
    assert "Unknown tool" in json.loads(content[0].text)["error"]


@pytest.mark.asyncio
async def test_call_missing_argument():
    """Test a missing required argument is reported as an error."""
    content = await call_tool("find_symbol", {"path": "main.go"})
    assert "error" in json.loads(content[0].text)


def test_server_name():
    """Test the server identifies itself."""
    assert server.name == "tako"
