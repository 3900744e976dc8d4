"""Shared types for Notebox."""

from pydantic import BaseModel, Field


class Note(BaseModel, frozen=True):
    """A named text note."""

    name: str = Field(min_length=1, description="Unique note name")
    text: str = Field(default="", description="Note body")


__all__ = ["Note"]
