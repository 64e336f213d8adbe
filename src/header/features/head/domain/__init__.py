"""Domain types for the head feature."""
