"""Note CRUD endpoints.

Endpoints are plain ``def`` functions and run in the FastAPI threadpool.
"""

from typing import Annotated

from fastapi import APIRouter, Form, status
from pydantic import BaseModel, Field

from notebox.api.deps import StoreDep
from notebox.core.types import Note

router = APIRouter()


class UpdateNoteRequest(BaseModel):
    """Request to replace the text of a note."""

    content: str = Field(description="New note text")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    detail: str


@router.get("/notes", response_model=list[Note])
def list_notes(store: StoreDep) -> list[Note]:
    """
    Get all notes in creation order.
    """
    return store.get_all()


@router.get(
    "/notes/{name}",
    response_model=Note,
    responses={404: {"model": MessageResponse, "description": "Note not found"}},
)
def get_note(name: str, store: StoreDep) -> Note:
    """
    Get a note by name.
    """
    return store.get_by_name(name)


@router.put(
    "/notes/{name}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse, "description": "Note not found"}},
)
def update_note(
    name: str, request: UpdateNoteRequest, store: StoreDep
) -> MessageResponse:
    """
    Replace the text of an existing note.
    """
    store.update(name, request.content)
    return MessageResponse(detail="Note updated")


@router.delete(
    "/notes/{name}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse, "description": "Note not found"}},
)
def delete_note(name: str, store: StoreDep) -> MessageResponse:
    """
    Delete a note by name.
    """
    store.delete(name)
    return MessageResponse(detail="Note deleted")


@router.post(
    "/write",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={409: {"model": MessageResponse, "description": "Note already exists"}},
)
def write_note(
    note_name: Annotated[str, Form()],
    store: StoreDep,
    note: Annotated[str, Form()] = "",
) -> MessageResponse:
    """
    Create a new note from the upload form fields.
    """
    store.create(note_name, note)
    return MessageResponse(detail="Note saved")
