"""Platform services (logging)."""
