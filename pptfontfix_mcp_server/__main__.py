"""
Entry point for running the PPT Font Fix MCP Server as a module.
Allows: python -m pptfontfix_mcp_server
"""

from .server import main

if __name__ == "__main__":
    main()
