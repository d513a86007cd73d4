"""Signup form endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from src.api.dependencies import get_db, get_submission_fields
from src.api.templating import render_form
from src.schemas.submission import FieldError
from src.services.users import SubmissionError, create_user
from src.services.validation import preserved_values, validate_submission

router = APIRouter(tags=["form"])

SUCCESS_MESSAGE = "Form submitted successfully!"


@router.get("/", response_class=HTMLResponse)
def show_form(request: Request):
    """Render the empty form."""
    return render_form(request)


@router.post("/submit", response_class=HTMLResponse)
def submit_form(
    request: Request,
    fields: Annotated[dict[str, Any], Depends(get_submission_fields)],
    db: Annotated[Session, Depends(get_db)],
):
    """Validate a submission, store it and re-render the form."""
    form, errors = validate_submission(fields)
    if form is None:
        return render_form(
            request,
            errors=errors,
            old=preserved_values(fields),
            status_code=422,
        )

    try:
        create_user(db, form)
    except SubmissionError as e:
        return render_form(
            request,
            errors=[FieldError(msg=e.user_message)],
            old=preserved_values(fields),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return render_form(request, success=SUCCESS_MESSAGE)
