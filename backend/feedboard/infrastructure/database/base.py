"""Declarative base for the SQL article store."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for the feed's ORM models; owns the table metadata."""
