"""MCP server for ipcspec-mcp."""

import asyncio
import json
import logging
import os

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.parse_source import parse_source
from .tools.parse_file import parse_file, max_file_size_from_env
from .tools.collect_types import collect_types, check_builtin_type


logger = logging.getLogger(__name__)

# Create server
server = Server("ipcspec-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="parse_specs",
            description="Extract exported function signatures, type/interface declarations and import statements from TypeScript source text, each with the custom (non-builtin) types it references.",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": {
                        "type": "string",
                        "description": "TypeScript source text"
                    }
                },
                "required": ["source"]
            }
        ),
        Tool(
            name="parse_file",
            description="Read a TypeScript file and extract its function, type and import specs. Relative paths resolve against IPCSPEC_PROJECT_PATH or the working directory.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to a .ts file (absolute or relative, supports ~ for home directory)"
                    }
                },
                "required": ["path"]
            }
        ),
        Tool(
            name="collect_custom_types",
            description="Collect the custom (non-builtin) type names referenced in an arbitrary TypeScript fragment. Generic type arguments are not collected.",
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {
                        "type": "string",
                        "description": "TypeScript fragment (function, type alias, import statement, ...)"
                    }
                },
                "required": ["code"]
            }
        ),
        Tool(
            name="is_builtin_type",
            description="Check whether a type name is a reserved builtin (string, number, boolean, void, any, unknown, null, undefined, never, object, Function).",
            inputSchema={
                "type": "object",
                "properties": {
                    "type_name": {
                        "type": "string",
                        "description": "Type name to check"
                    }
                },
                "required": ["type_name"]
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    project_path = os.environ.get("IPCSPEC_PROJECT_PATH")

    try:
        if name == "parse_specs":
            result = parse_source(source=arguments["source"])
        elif name == "parse_file":
            result = parse_file(
                path=arguments["path"],
                project_path=project_path,
                max_size=max_file_size_from_env()
            )
        elif name == "collect_custom_types":
            result = collect_types(code=arguments["code"])
        elif name == "is_builtin_type":
            result = check_builtin_type(type_name=arguments["type_name"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.debug("Tool %s failed", name, exc_info=True)
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
    # stdout carries the MCP transport, so logs go to stderr
    logging.basicConfig(
        level=os.environ.get("IPCSPEC_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
