"""Employee and performance review records in SQLite, with a client for a remote employee API."""

__version__ = "0.1.0"
__all__ = ["app", "database", "models", "network"]