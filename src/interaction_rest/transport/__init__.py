"""HTTP transport and request encoding."""
