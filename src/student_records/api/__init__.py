"""REST API for Student Records."""

from student_records.api.app import app, create_app
from student_records.api.models import (
    APIResponse,
    StudentPayload,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "StudentPayload",
    "StudentResponse",
    "app",
    "create_app",
]
