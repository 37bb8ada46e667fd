"""
PPT Font Fix MCP Server - PowerPoint font analysis and repair.

This MCP server provides tools for:
- Opening presentations into independent sessions
- Classifying fonts as standard, inconsistently used, or unused
- Locating empty and off-slide text boxes
- Removing shapes and replacing inconsistent fonts, then saving a new file
"""

from .server import main

__all__ = ["main"]
