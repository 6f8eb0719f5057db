#!/usr/bin/env python3
"""
Tools CLI for the Google Drive MCP Server

Calls the registered MCP tools directly, without the protocol layer, using
Application Default Credentials.

Usage:
    python tools_cli.py --list
    python tools_cli.py --info rewrite_slide
    python tools_cli.py --tool get_document --documentId "doc_id_here"
    python tools_cli.py --tool update_spreadsheet --spreadsheetId abc --range "Sheet1\\!A1:B2" --values '[["a", 1]]'
"""
import argparse
import asyncio
import inspect
import json
import logging
import os
import sys
from typing import Any, Dict, List

# Suppress googleapiclient discovery cache warning
logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.ERROR)

# Configure logging - use WARNING to reduce noise
logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'WARNING'),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def unescape_shell_chars(value: str) -> str:
    """Unescape common shell-escaped characters in string values."""
    if not isinstance(value, str):
        return value
    value = value.replace(r"\\", "\x00")  # Temporarily protect \\
    value = value.replace(r"\!", "!")
    value = value.replace(r"\$", "$")
    value = value.replace(r"\`", "`")
    value = value.replace(r"\#", "#")
    value = value.replace(r"\"", '"')
    value = value.replace(r"\'", "'")
    value = value.replace("\x00", "\\")  # Restore single backslash from \\
    return value


def parse_cli_params(unknown: List[str]) -> Dict[str, Any]:
    """Turn ['--name', 'value', '--flag'] into {'name': 'value', 'flag': True}."""
    raw_kwargs: Dict[str, Any] = {}
    i = 0
    while i < len(unknown):
        arg = unknown[i]
        if arg.startswith('--'):
            param_name = arg[2:]
            if i + 1 < len(unknown) and not unknown[i + 1].startswith('--'):
                raw_kwargs[param_name] = unescape_shell_chars(unknown[i + 1])
                i += 2
            else:
                raw_kwargs[param_name] = True
                i += 1
        else:
            i += 1
    return raw_kwargs


def convert_value(value: Any, annotation: Any) -> Any:
    """Convert a raw CLI string according to a tool parameter annotation."""
    if value is True or annotation is inspect.Parameter.empty:
        return value
    if annotation is int:
        return int(value)
    if annotation is str:
        return value
    # Union[str, List[...]] and friends: accept JSON when it parses
    if isinstance(value, str) and value.strip()[:1] in ('[', '{'):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def tool_function(tool: Any):
    """Return the underlying coroutine function of a registered tool."""
    return getattr(tool, 'fn', tool)


def init_tools() -> Dict[str, Any]:
    """Build the services context and register all tools."""
    from fastmcp import FastMCP

    from core.config import load_config
    from core.server import register_tools
    from core.services import build_workspace_services

    config = load_config()
    services = build_workspace_services(config)
    return register_tools(FastMCP(name="google_drive_cli"), services)


def list_tools(tools: Dict[str, Any]) -> None:
    print("\nAvailable Tools:")
    print("=" * 60)
    for name, tool in sorted(tools.items()):
        doc = inspect.getdoc(tool_function(tool)) or "No description"
        print(f"  - {name}")
        print(f"    {doc.splitlines()[0]}")
    print()


def get_tool_info(tools: Dict[str, Any], tool_name: str) -> None:
    if tool_name not in tools:
        print(f"Tool '{tool_name}' not found.")
        return
    fn = tool_function(tools[tool_name])
    print(f"\nTool: {tool_name}")
    print("=" * 60)
    print(inspect.getdoc(fn) or "No description")
    print("\nParameters:")
    for param_name, param in inspect.signature(fn).parameters.items():
        annotation = getattr(param.annotation, '__name__', str(param.annotation))
        default = f" = {param.default!r}" if param.default is not inspect.Parameter.empty else ""
        print(f"  - {param_name}: {annotation}{default}")
    print()


async def call_tool(tools: Dict[str, Any], tool_name: str, raw_kwargs: Dict[str, Any]) -> str:
    """Convert CLI arguments for a tool and invoke it."""
    if tool_name not in tools:
        raise ValueError(f"Tool '{tool_name}' not found. Use --list to see available tools.")

    fn = tool_function(tools[tool_name])
    parameters = inspect.signature(fn).parameters
    kwargs = {
        name: convert_value(value, parameters[name].annotation if name in parameters else inspect.Parameter.empty)
        for name, value in raw_kwargs.items()
    }
    return await fn(**kwargs)


def main():
    parser = argparse.ArgumentParser(
        description="CLI for Google Drive MCP tools",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--list', '-l', action='store_true', help='List all available tools')
    parser.add_argument('--tool', '-t', type=str, help='Tool name to call')
    parser.add_argument('--info', type=str, help='Show detailed info about a tool')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')

    # Allow arbitrary additional arguments for tool parameters
    args, unknown = parser.parse_known_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        tools = init_tools()
    except Exception as e:
        print(f"Failed to initialize: {e}")
        logger.debug("Initialization failed", exc_info=True)
        sys.exit(1)

    if args.list:
        list_tools(tools)
        return

    if args.info:
        get_tool_info(tools, args.info)
        return

    if args.tool:
        try:
            result = asyncio.run(call_tool(tools, args.tool, parse_cli_params(unknown)))
        except (ValueError, TypeError) as e:
            print(f"Error: {e}")
            sys.exit(1)
        print(result)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
