"""
Google Slides MCP Integration

This module provides MCP tools for reading presentations and rewriting slides.
"""

from .slides_tools import create_slides_tools

__all__ = [
    "create_slides_tools",
]
