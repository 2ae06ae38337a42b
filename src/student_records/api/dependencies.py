"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from student_records.service import StudentService
from student_records.store import StudentRepository

# Global StudentService instance (initialized on app startup)
_student_service: StudentService | None = None


def init_student_service(repository: StudentRepository | None = None) -> StudentService:
    """Initialize the global StudentService instance.

    Args:
        repository: Store to use. A fresh, empty one is created by default.
    """
    global _student_service  # noqa: PLW0603
    _student_service = StudentService(repository or StudentRepository())
    return _student_service


def close_student_service() -> None:
    """Drop the global StudentService instance and its students."""
    global _student_service  # noqa: PLW0603
    if _student_service is not None:
        _student_service.repository.clear()
        _student_service = None


def get_student_service() -> Generator[StudentService, None, None]:
    """Dependency that provides the StudentService instance."""
    if _student_service is None:
        raise RuntimeError("StudentService not initialized. Call init_student_service() first.")
    yield _student_service


# Type alias for dependency injection
StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
