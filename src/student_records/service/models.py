"""Data models for the Service module."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - used at runtime by dataclasses
from uuid import UUID  # noqa: TC003 - used at runtime by dataclasses


@dataclass
class StudentDTO:
    """External representation of a student.

    ``id`` is None on input to create; it is always set on output.
    """

    name: str
    id_number: str
    email: str
    enrollment_date: datetime
    id: UUID | None = None
