"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from student_records.service import StudentDTO, StudentService
from student_records.store import Student, StudentRepository

ENROLLED = datetime(2024, 9, 1, 8, 30)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


def _student_fields(id_number: str, overrides: dict[str, Any]) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "name": "Ada Lovelace",
        "id_number": id_number,
        "email": "ada@example.com",
        "enrollment_date": ENROLLED,
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def enrolled() -> datetime:
    """Enrollment date used by the student factories."""
    return ENROLLED


@pytest.fixture
def make_student() -> Callable[..., Student]:
    """Factory for valid Student entities."""

    def _make(id_number: str = "S100", **overrides: Any) -> Student:
        return Student(**_student_fields(id_number, overrides))

    return _make


@pytest.fixture
def make_dto() -> Callable[..., StudentDTO]:
    """Factory for valid StudentDTOs without an id."""

    def _make(id_number: str = "S100", **overrides: Any) -> StudentDTO:
        return StudentDTO(**_student_fields(id_number, overrides))

    return _make


@pytest.fixture
def student_payload() -> Callable[..., dict[str, Any]]:
    """Factory for valid JSON bodies of create/update requests."""

    def _make(id_number: str = "S100", **overrides: Any) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": "Ada Lovelace",
            "idNumber": id_number,
            "email": "ada@example.com",
            "enrollmentDate": "2024-09-01T08:30:00",
        }
        body.update(overrides)
        return body

    return _make


@pytest.fixture
def repository() -> StudentRepository:
    """Create an empty in-memory StudentRepository."""
    return StudentRepository()


@pytest.fixture
def service(repository: StudentRepository) -> StudentService:
    """Create a StudentService over the test repository."""
    return StudentService(repository)
