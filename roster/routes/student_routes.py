import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from roster.auth.dependencies import get_current_user
from roster.auth.jwt_handler import TokenClaims
from roster.core.errors import NotFound, ValidationError
from roster.database import get_db
from roster.models.student import Student
from roster.repositories.student_repository import NOT_FOUND_MESSAGE, StudentRepository
from roster.schemas.student import (
    MessageResponse,
    StudentCreatedResponse,
    StudentRequest,
    StudentResponse,
)

router = APIRouter(tags=['students'])

logger = logging.getLogger(__name__)

# SQLite INTEGER primary keys are signed 64-bit
MAX_STUDENT_ID = 2**63 - 1


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    return StudentRepository(db)


def parse_student_id(raw_id: str) -> int:
    """Ids that are not integers, or that no row could have, are simply not found."""
    try:
        student_id = int(raw_id)
    except ValueError as exc:
        raise NotFound(NOT_FOUND_MESSAGE) from exc
    if not 0 < student_id <= MAX_STUDENT_ID:
        raise NotFound(NOT_FOUND_MESSAGE)
    return student_id


@router.get('', response_model=list[StudentResponse])
def list_students(
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
) -> list[Student]:
    return students.list(current_user.user_id)


@router.get('/search/{query}', response_model=list[StudentResponse])
def search_students(
    query: str,
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
) -> list[Student]:
    term = query.strip()
    if not term:
        raise ValidationError('Search term is required')
    return students.search(current_user.user_id, term)


@router.get('/{student_id}', response_model=StudentResponse)
def get_student(
    student_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
) -> Student:
    return students.get(current_user.user_id, parse_student_id(student_id))


@router.post('', response_model=StudentCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    data: StudentRequest,
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
):
    student_id = students.create(current_user.user_id, data.to_fields())
    logger.info('User %s added student %s', current_user.user_id, student_id)
    return {'id': student_id, 'message': 'Student added successfully'}


@router.put('/{student_id}', response_model=MessageResponse)
def update_student(
    student_id: str,
    data: StudentRequest,
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
):
    students.update(current_user.user_id, parse_student_id(student_id), data.to_fields())
    return {'message': 'Student updated successfully'}


@router.delete('/{student_id}', response_model=MessageResponse)
def delete_student(
    student_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    students: StudentRepository = Depends(get_student_repository),
):
    students.delete(current_user.user_id, parse_student_id(student_id))
    logger.info('User %s deleted student %s', current_user.user_id, student_id)
    return {'message': 'Student deleted successfully'}
