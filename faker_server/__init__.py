"""MCP server exposing Faker-backed data generators as tools."""
