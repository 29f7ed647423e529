"""Directory traversal."""
