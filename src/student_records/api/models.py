"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from student_records.service import StudentDTO

T = TypeVar("T")

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class APIResponse(BaseModel, Generic[T]):
    """Standard API response envelope."""

    success: bool
    message: str
    data: T | None = None


# Student models


class StudentPayload(BaseModel):
    """Request model for creating or fully updating a student.

    Keys are camelCase on the wire (``idNumber``); snake_case is accepted too.
    Unknown keys, ``id`` included, are ignored: create assigns the id and
    update takes it from the path.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    name: str = Field(..., max_length=100)
    id_number: str = Field(..., max_length=20)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    enrollment_date: datetime

    @field_validator("name", "id_number", "email")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def to_dto(self) -> StudentDTO:
        """Convert to the service-layer DTO."""
        return StudentDTO(
            name=self.name,
            id_number=self.id_number,
            email=self.email,
            enrollment_date=self.enrollment_date,
        )


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: UUID
    name: str
    id_number: str
    email: str
    enrollment_date: datetime


def student_to_response(student: Any) -> StudentResponse:
    """Convert a StudentDTO to StudentResponse."""
    return StudentResponse.model_validate(student)


# Health models


class HealthResponse(BaseModel):
    """Response model for the liveness check."""

    status: str
