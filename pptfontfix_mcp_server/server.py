"""
PPT Font Fix MCP Server - Main server implementation.
"""

import asyncio
import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, TextContent, Tool

from .config import Settings
from .prompts import FIX_PPT_FONTS_PROMPT, build_fix_fonts_prompt
from .tools.errors import ArgumentError
from .tools.models import parse_locations
from .tools.paths import build_output_path, resolve_input_path
from .tools.session import SessionRegistry

settings = Settings.from_env()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

server = Server("pptfontfix-mcp-server")
registry = SessionRegistry()

LOCATION_SCHEMA = {
    "type": "object",
    "properties": {
        "slide_number": {"type": "integer", "description": "1-based slide number"},
        "shape_name": {"type": "string", "description": "Shape name within the slide"},
    },
    "required": ["slide_number", "shape_name"],
}

SESSION_ID_SCHEMA = {
    "type": "string",
    "description": "Session id returned by open_ppt_file",
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="open_ppt_file",
            description=(
                "Open a PowerPoint file (.pptx) and load it into memory for font analysis. "
                "Returns a session_id that must be passed to the other tools. "
                "Relative paths are also looked up in the server's input directory. "
                "The deck stays in memory until close_ppt_file is called with that session_id."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path of the PowerPoint file to open",
                    },
                },
                "required": ["file_path"],
            },
        ),
        Tool(
            name="analyze_fonts",
            description=(
                "Analyze fonts used in an opened PowerPoint file. "
                "Returns JSON with the standard (most used) fonts, unused fonts, "
                "inconsistently used fonts, and the slide/shape locations of empty or "
                "off-slide text boxes and of inconsistent fonts."
            ),
            inputSchema={
                "type": "object",
                "properties": {"session_id": SESSION_ID_SCHEMA},
                "required": ["session_id"],
            },
        ),
        Tool(
            name="update_ppt_file",
            description=(
                "Remove shapes at the given locations, replace inconsistently used fonts with "
                "a font found visible by analyze_fonts, and save the result to a new file. "
                "Run analyze_fonts first; the replacement font is validated against it."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "session_id": SESSION_ID_SCHEMA,
                    "replacement_font": {
                        "type": "string",
                        "description": "The font to replace all inconsistent fonts with",
                    },
                    "inconsistent_fonts_to_replace": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Font names to be replaced",
                        "default": [],
                    },
                    "locations_to_remove": {
                        "type": "array",
                        "items": LOCATION_SCHEMA,
                        "description": "Shape locations (from the analysis result) to remove",
                        "default": [],
                    },
                    "output_directory": {
                        "type": "string",
                        "description": "Optional: directory to save the modified file in",
                    },
                    "new_file_name": {
                        "type": "string",
                        "description": "File name for the modified PowerPoint file",
                    },
                },
                "required": ["session_id", "replacement_font", "new_file_name"],
            },
        ),
        Tool(
            name="close_ppt_file",
            description=(
                "Close a session and release the presentation held in memory. "
                "Sessions are never closed automatically, so call this once a deck is saved."
            ),
            inputSchema={
                "type": "object",
                "properties": {"session_id": SESSION_ID_SCHEMA},
                "required": ["session_id"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "open_ppt_file":
            result = await handle_open_ppt_file(arguments)
        elif name == "analyze_fonts":
            result = await handle_analyze_fonts(arguments)
        elif name == "update_ppt_file":
            result = await handle_update_ppt_file(arguments)
        elif name == "close_ppt_file":
            result = await handle_close_ppt_file(arguments)
        else:
            result = f"Unknown tool: {name}"

        return [TextContent(type="text", text=result)]

    except Exception as e:
        logger.exception(f"Error in tool {name}")
        return [TextContent(type="text", text=f"Error: {str(e)}")]


@server.list_prompts()
async def list_prompts() -> list[Prompt]:
    """List all available prompts."""
    return [
        Prompt(
            name=FIX_PPT_FONTS_PROMPT,
            description="Generate a structured workflow prompt for analyzing and fixing PPT fonts.",
            arguments=[
                PromptArgument(
                    name="host_file_path",
                    description="The full path to the PPTX file on the host machine",
                    required=True,
                ),
            ],
        ),
    ]


@server.get_prompt()
async def get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
    """Render a prompt by name."""
    if name != FIX_PPT_FONTS_PROMPT:
        raise ValueError(f"Unknown prompt: {name}")

    host_file_path = (arguments or {}).get("host_file_path")
    if not host_file_path:
        raise ValueError("host_file_path is required")

    return GetPromptResult(
        description="Start PPT Font Fix Workflow",
        messages=[
            PromptMessage(
                role="user",
                content=TextContent(type="text", text=build_fix_fonts_prompt(host_file_path)),
            )
        ],
    )


async def handle_open_ppt_file(args: dict[str, Any]) -> str:
    """Handle open_ppt_file tool."""
    pptx_path = resolve_input_path(args.get("file_path", ""), settings.input_dir)

    session = registry.create()
    try:
        await session.open(pptx_path)
    except Exception:
        registry.close(session.session_id)
        raise

    return (
        f"PPT file '{pptx_path}' successfully loaded into memory.\n"
        f"session_id: {session.session_id}\n"
        "You can now call the analyze_fonts tool."
    )


async def handle_analyze_fonts(args: dict[str, Any]) -> str:
    """Handle analyze_fonts tool."""
    session = registry.get(args.get("session_id"))
    result = await session.analyze()
    logger.info(
        "Font analysis completed. Inconsistently used fonts count: %d",
        len(result.inconsistently_used_fonts),
    )
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


async def handle_update_ppt_file(args: dict[str, Any]) -> str:
    """Handle update_ppt_file tool."""
    session = registry.get(args.get("session_id"))
    replacement_font = args.get("replacement_font")
    fonts_to_replace = args.get("inconsistent_fonts_to_replace") or []
    locations_input = args.get("locations_to_remove") or []

    # Some clients send arrays as inline JSON strings
    if isinstance(locations_input, str):
        try:
            locations_input = json.loads(locations_input)
        except json.JSONDecodeError:
            raise ArgumentError("Invalid JSON in locations_to_remove")
    if isinstance(fonts_to_replace, str):
        fonts_to_replace = [fonts_to_replace]

    locations = parse_locations(locations_input)
    output_path = build_output_path(
        args.get("new_file_name", ""),
        args.get("output_directory"),
        settings.output_dir,
    )

    removed, replaced = await session.apply_fixes(replacement_font, fonts_to_replace, locations)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("%d unused font shapes removed.", removed)
    logger.info("%d instances of inconsistent fonts replaced with '%s'.", replaced, replacement_font)

    saved_path = await session.save(output_path)
    return f"PPT update complete. Removed: {removed}, Replaced: {replaced}. Result: {saved_path}"


async def handle_close_ppt_file(args: dict[str, Any]) -> str:
    """Handle close_ppt_file tool."""
    session_id = args.get("session_id")
    registry.close(session_id)
    return f"Session {session_id} closed."


def main():
    """Main entry point."""
    asyncio.run(run_server())


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    main()
