"""HTML rendering for the signup form."""

from pathlib import Path

from fastapi import Request, status
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from src.schemas.submission import FieldError

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
FORM_TEMPLATE = "form.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_form(
    request: Request,
    *,
    errors: list[FieldError] | None = None,
    old: dict[str, str] | None = None,
    success: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Render the form with its three slots: errors, previous values and success."""
    return templates.TemplateResponse(
        request,
        FORM_TEMPLATE,
        {"errors": errors or None, "old": old or {}, "success": success},
        status_code=status_code,
    )
