"""
Google Sheets MCP Integration

This module provides MCP tools for interacting with Google Sheets API.
"""

from .sheets_tools import create_sheets_tools

__all__ = [
    "create_sheets_tools",
]
