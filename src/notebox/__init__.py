"""Notebox - named text notes over HTTP, persisted to a single JSON file."""

__version__ = "1.0.0"
