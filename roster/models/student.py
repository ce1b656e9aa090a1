"""Student model definitions."""

import enum

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from roster.database import Base


class StudentStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    GRADUATED = "Graduated"

    @classmethod
    def normalize(cls, value: str | None) -> str:
        """Canonicalize known statuses; unknown values are kept as given."""
        if value is None or not value.strip():
            return cls.ACTIVE.value
        cleaned = value.strip()
        for member in cls:
            if member.value.lower() == cleaned.lower():
                return member.value
        return cleaned


class Student(Base):
    """Represents one enrolled student, owned by a single user."""
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("user_id", "email", name="uq_students_user_email"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String)
    address = Column(String)
    enrollment_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default=StudentStatus.ACTIVE.value)
    created_at = Column(DateTime, server_default=func.current_timestamp())
