"""Data models for the student store."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003 - used at runtime by dataclasses
from typing import Generic, TypeVar

T = TypeVar("T")


def generate_id() -> uuid.UUID:
    """Generate a new random student id."""
    return uuid.uuid4()


def normalize_id_number(id_number: str) -> str:
    """Key used for case-insensitive ID number comparison.

    Plain per-character lowercasing: "straße" and "STRASSE" stay distinct.
    """
    return id_number.lower()


@dataclass
class Student:
    """Student entity - the source of truth for a student record.

    Attributes:
        name: Full name, at most 100 characters.
        id_number: Externally supplied identifier, unique case-insensitively.
        email: Contact email address.
        enrollment_date: When the student enrolled.
        id: Internally generated identifier, never changed after creation.
    """

    name: str
    id_number: str
    email: str
    enrollment_date: datetime
    id: uuid.UUID = field(default_factory=generate_id)


@dataclass
class OperationResult(Generic[T]):
    """Envelope returned by every store, service and API operation.

    Attributes:
        success: Whether the operation succeeded.
        message: Human-readable outcome.
        data: Payload, or None when there is nothing to return.
    """

    success: bool
    message: str
    data: T | None = None

    @classmethod
    def ok(cls, data: T | None, message: str) -> OperationResult[T]:
        """Build a successful result."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str, data: T | None = None) -> OperationResult[T]:
        """Build a failed result."""
        return cls(success=False, message=message, data=data)
