"""MCP server exposing the salary calculator."""
