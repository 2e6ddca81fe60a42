"""MCP adapter (optional ``mcp`` extra)."""
