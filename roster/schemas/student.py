from datetime import date, datetime

from pydantic import BaseModel, Field

from roster.repositories.student_repository import StudentFields


class StudentRequest(BaseModel):
    """Create/update body. Required fields are checked by the repository."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    enrollment_date: date | None = Field(default=None, alias="enrollmentDate")
    status: str | None = None

    class Config:
        populate_by_name = True

    def to_fields(self) -> StudentFields:
        return StudentFields(
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address,
            enrollment_date=self.enrollment_date,
            status=self.status,
        )


class StudentResponse(BaseModel):
    id: int
    user_id: int = Field(alias="userId")
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    enrollment_date: date = Field(alias="enrollmentDate")
    status: str
    created_at: datetime | None = Field(default=None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class StudentCreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str
