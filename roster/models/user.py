"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from roster.database import Base


class User(Base):
    """Represents an account that owns a roster of students."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    created_at = Column(DateTime, server_default=func.current_timestamp())
