"""Service - Business rules for student records."""

from student_records.service.models import StudentDTO
from student_records.service.service import StudentService

__all__ = [
    "StudentDTO",
    "StudentService",
]
