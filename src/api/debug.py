"""Debug API endpoints for development and troubleshooting."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.api.dependencies import get_db
from src.schemas.user import UserResponse
from src.services.users import list_users

logger = logging.getLogger(__name__)

router = APIRouter(tags=["debug"])


@router.get("/users", response_model=list[UserResponse])
def get_users(db: Annotated[Session, Depends(get_db)]):
    """List every stored submission, newest first.

    Unauthenticated; disable with EXPOSE_USER_LISTING=false outside development.
    """
    try:
        users = list_users(db)
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch users: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Unable to fetch users"},
        )
    return [UserResponse.model_validate(user) for user in users]
