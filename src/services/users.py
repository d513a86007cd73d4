"""User record persistence."""

import logging

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.schemas.submission import SubmissionForm
from src.services.security import get_password_hash

logger = logging.getLogger(__name__)

# MySQL ER_DUP_ENTRY and PostgreSQL unique_violation
MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"


class SubmissionError(Exception):
    """Raised when a submission could not be stored."""

    user_message = "An error occurred. Please try again."


class EmailAlreadyRegisteredError(SubmissionError):
    """Raised when the email collides with the unique constraint."""

    user_message = "The email is already registered."


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check whether an IntegrityError comes from a unique constraint."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == POSTGRES_UNIQUE_VIOLATION:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    text = str(orig)
    return "UNIQUE constraint failed" in text or "Duplicate entry" in text


def create_user(db: Session, form: SubmissionForm) -> User:
    """Hash the password and insert one user row.

    Raises EmailAlreadyRegisteredError on a duplicate email and
    SubmissionError on any other storage failure. Nothing is written when
    either is raised.
    """
    user = User(
        name=form.name,
        email=form.email,
        password_hash=get_password_hash(form.password),
        message=form.message or None,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            logger.info("Rejected submission with an already registered email")
            raise EmailAlreadyRegisteredError(str(e.orig)) from e
        logger.error(f"DB error: {e.orig}")
        raise SubmissionError(str(e.orig)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"DB error: {e}")
        raise SubmissionError(str(e)) from e
    db.refresh(user)
    logger.info(f"Stored submission {user.id}")
    return user


def list_users(db: Session) -> list[User]:
    """Get all users, newest first."""
    return db.query(User).order_by(desc(User.created_at), desc(User.id)).all()
