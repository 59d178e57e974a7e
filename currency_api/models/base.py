"""Shared declarative base for all ORM models.

The seed script and the test fixtures create tables straight from
``Base.metadata``, so every model must be imported via ``currency_api.models``.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
