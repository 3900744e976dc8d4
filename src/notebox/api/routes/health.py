"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter

from notebox.api.deps import StoreDep

router = APIRouter()


@router.get("/health")
def health_check(store: StoreDep) -> dict[str, Any]:
    """
    Report service status and the size of the note collection.
    """
    return {"status": "healthy", "notes": len(store), "cache": str(store.path)}


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness probe.

    Returns:
        Simple OK response if the service is running
    """
    return {"status": "ok"}
