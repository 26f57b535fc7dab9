"""Read-only SQLite file reader with a minimal SELECT query engine."""

__version__ = "0.1.0"