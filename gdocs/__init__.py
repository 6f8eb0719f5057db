"""
Google Docs MCP Integration

This module provides MCP tools for reading and replacing Google Docs content.
"""

from .docs_tools import create_docs_tools

__all__ = [
    "create_docs_tools",
]
