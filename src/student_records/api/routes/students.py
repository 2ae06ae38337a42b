"""Student CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from student_records.api.dependencies import StudentServiceDep
from student_records.api.models import (
    APIResponse,
    StudentPayload,
    StudentResponse,
    student_to_response,
)
from student_records.store import OperationResult

router = APIRouter(prefix="/students", tags=["students"])


def _student_envelope(
    result: OperationResult, response: Response
) -> APIResponse[StudentResponse]:
    """Map a single-student result to the envelope, 400 on failure."""
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    data = student_to_response(result.data) if result.data is not None else None
    return APIResponse[StudentResponse](success=result.success, message=result.message, data=data)


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(
    service: StudentServiceDep, response: Response
) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    result = service.get_all()
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    data = [student_to_response(s) for s in result.data] if result.data is not None else None
    return APIResponse[list[StudentResponse]](
        success=result.success, message=result.message, data=data
    )


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(
    student_id: UUID, service: StudentServiceDep, response: Response
) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    return _student_envelope(service.get_by_id(student_id), response)


@router.post("", response_model=APIResponse[StudentResponse])
def create_student(
    student: StudentPayload, service: StudentServiceDep, response: Response
) -> APIResponse[StudentResponse]:
    """Create a new student."""
    return _student_envelope(service.create(student.to_dto()), response)


@router.put("/{student_id}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: UUID, student: StudentPayload, service: StudentServiceDep, response: Response
) -> APIResponse[StudentResponse]:
    """Replace every field of a student."""
    return _student_envelope(service.update(student_id, student.to_dto()), response)


@router.delete("/{student_id}", response_model=APIResponse[bool])
def delete_student(
    student_id: UUID, service: StudentServiceDep, response: Response
) -> APIResponse[bool]:
    """Delete a student."""
    result = service.delete(student_id)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return APIResponse[bool](success=result.success, message=result.message, data=result.data)
