"""MCP server for tako."""

import asyncio
import json

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.get_symbols import get_symbols
from .tools.find_symbol import find_symbol
from .tools.get_syntax_tree import get_syntax_tree


# Create server
server = Server("tako")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_symbols",
            description="Get the top-level declarations (functions, methods, types, variables) of a source file or every source file under a directory, as body-less signatures with their leading comments.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "File or directory path (absolute or relative, supports ~ for home directory)"
                    }
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="find_symbol",
            description="Get the full source of top-level declarations in a file whose name matches a regular expression.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Source file path"
                    },
                    "pattern": {
                        "type": "string",
                        "description": "Regular expression matched against declaration names (e.g., '^Parse')"
                    }
                },
                "required": ["path", "pattern"]
            }
        ),
        Tool(
            name="get_syntax_tree",
            description="Render the tree-sitter syntax tree of a file as indented lines with a source preview per node.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Source file path"
                    },
                    "max_depth": {
                        "type": "integer",
                        "description": "Number of tree levels to render",
                        "default": 4
                    },
                    "terminal_width": {
                        "type": "integer",
                        "description": "Maximum line width",
                        "default": 120
                    }
                },
                "required": ["path"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_symbols":
            result = get_symbols(path=arguments["path"])
        elif name == "find_symbol":
            result = find_symbol(
                path=arguments["path"],
                pattern=arguments["pattern"]
            )
        elif name == "get_syntax_tree":
            result = get_syntax_tree(
                path=arguments["path"],
                max_depth=arguments.get("max_depth"),
                # No terminal behind stdio; fall back to a fixed width
                terminal_width=arguments.get("terminal_width", 120)
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
