"""Store - In-memory storage for student records."""

from student_records.store.models import OperationResult, Student, generate_id
from student_records.store.repository import StudentRepository

__all__ = [
    "OperationResult",
    "Student",
    "StudentRepository",
    "generate_id",
]
