"""Owner-scoped data access for student records.

Every query filters on ``Student.user_id == owner_id``. A row that belongs to a
different owner is treated exactly like a missing row, so callers can never
distinguish "not yours" from "does not exist".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.errors import DuplicateEmail, NotFound, StorageFault, ValidationError
from roster.database import is_unique_violation
from roster.models.student import Student, StudentStatus

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, email, and enrollment date are required"
NOT_FOUND_MESSAGE = "Student not found"


@dataclass
class StudentFields:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    enrollment_date: date | None = None
    status: str | None = None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _validated_values(fields: StudentFields) -> dict:
    name = _clean(fields.name)
    email = _clean(fields.email)
    if not name or not email or fields.enrollment_date is None:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    return {
        "name": name,
        "email": email,
        "phone": _clean(fields.phone),
        "address": _clean(fields.address),
        "enrollment_date": fields.enrollment_date,
        "status": StudentStatus.normalize(fields.status),
    }


class StudentRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list(self, owner_id: int) -> list[Student]:
        stmt = select(Student).where(Student.user_id == owner_id).order_by(Student.id.desc())
        return self._all(stmt)

    def get(self, owner_id: int, student_id: int) -> Student:
        stmt = select(Student).where(Student.id == student_id, Student.user_id == owner_id)
        try:
            student = self._session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("Student lookup failed")
            raise StorageFault() from exc

        if student is None:
            raise NotFound(NOT_FOUND_MESSAGE)
        return student

    def create(self, owner_id: int, fields: StudentFields) -> int:
        student = Student(user_id=owner_id, **_validated_values(fields))
        self._session.add(student)
        self._commit("insert")
        return student.id

    def update(self, owner_id: int, student_id: int, fields: StudentFields) -> None:
        values = _validated_values(fields)
        stmt = (
            update(Student)
            .where(Student.id == student_id, Student.user_id == owner_id)
            .values(**values)
        )
        result = self._execute(stmt, "update")
        if result.rowcount == 0:
            self._session.rollback()
            raise NotFound(NOT_FOUND_MESSAGE)
        self._commit("update")

    def delete(self, owner_id: int, student_id: int) -> None:
        stmt = delete(Student).where(Student.id == student_id, Student.user_id == owner_id)
        result = self._execute(stmt, "delete")
        if result.rowcount == 0:
            self._session.rollback()
            raise NotFound(NOT_FOUND_MESSAGE)
        self._commit("delete")

    def search(self, owner_id: int, term: str) -> list[Student]:
        stmt = (
            select(Student)
            .where(
                Student.user_id == owner_id,
                or_(
                    Student.name.icontains(term, autoescape=True),
                    Student.email.icontains(term, autoescape=True),
                ),
            )
            .order_by(Student.id.desc())
        )
        return self._all(stmt)

    def _all(self, stmt) -> list[Student]:
        try:
            return list(self._session.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            logger.exception("Student query failed")
            raise StorageFault() from exc

    def _execute(self, stmt, action: str):
        try:
            return self._session.execute(stmt)
        except SQLAlchemyError as exc:
            self._handle_write_error(exc, action)

    def _commit(self, action: str) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            self._handle_write_error(exc, action)

    def _handle_write_error(self, exc: SQLAlchemyError, action: str) -> None:
        self._session.rollback()
        if isinstance(exc, IntegrityError) and is_unique_violation(exc):
            raise DuplicateEmail() from exc
        logger.exception("Student %s failed", action)
        raise StorageFault() from exc
