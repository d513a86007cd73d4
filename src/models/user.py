"""User model."""

from sqlalchemy import Column, Integer, String, Text

from src.database import Base
from src.models.mixins import CreatedAtMixin

NAME_MAX_LENGTH = 100
MESSAGE_MAX_LENGTH = 2000


class User(Base, CreatedAtMixin):
    """A submitted form record. Created once, never updated."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    message = Column(Text, nullable=True)
