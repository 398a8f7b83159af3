"""Local JSON-backed note manager."""

__version__ = "1.0.0"
