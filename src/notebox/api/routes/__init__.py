"""API route modules."""

from notebox.api.routes import form, health, notes

__all__ = ["form", "health", "notes"]
