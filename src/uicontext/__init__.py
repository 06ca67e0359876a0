"""MCP server for Next.js, Tailwind CSS and Catalyst UI reference content."""

__version__ = "0.1.0"
