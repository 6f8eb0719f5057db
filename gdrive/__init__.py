"""
Google Drive MCP Integration

This module provides MCP tools for searching and listing Drive files.
"""
