"""Runtime configuration constants."""
