"""FastAPI dependencies for the Notebox API."""

from typing import Annotated

from fastapi import Depends, Request

from notebox.core.store import NoteStore, get_note_store


def get_store(request: Request) -> NoteStore:
    """
    Get the note store attached to the running application.

    Falls back to the default store when the app was started without one.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        store = get_note_store()
        request.app.state.store = store
    return store


# Type alias for dependency injection
StoreDep = Annotated[NoteStore, Depends(get_store)]
