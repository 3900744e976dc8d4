"""Static upload form."""

from importlib import resources

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

UPLOAD_FORM = "UploadForm.html"


@router.get("/", response_class=HTMLResponse)
def upload_form() -> HTMLResponse:
    """Serve the upload form."""
    html = (
        resources.files("notebox.api")
        .joinpath("static", UPLOAD_FORM)
        .read_text(encoding="utf-8")
    )
    return HTMLResponse(html)
