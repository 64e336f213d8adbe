"""Local filesystem adapters."""
