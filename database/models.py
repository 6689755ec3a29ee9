"""
SQLAlchemy ORM models for user credentials.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    # Primary key doubles as the uniqueness guard for concurrent registrations.
    username = Column(String(100), primary_key=True)
    name = Column(String(100), nullable=False)
    password = Column(String(100), nullable=False)
    token = Column(String(100), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
