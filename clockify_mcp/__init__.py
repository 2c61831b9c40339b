"""MCP server exposing the Clockify time-tracking API as tools."""

__version__ = "1.0.0"
