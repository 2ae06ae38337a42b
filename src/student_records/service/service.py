"""StudentService - business rules on top of the student store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from student_records.service.models import StudentDTO
from student_records.store import OperationResult, Student, generate_id
from student_records.store.models import normalize_id_number

if TYPE_CHECKING:
    from collections.abc import Callable
    from uuid import UUID

    from student_records.store import StudentRepository

logger = logging.getLogger(__name__)

# Attempts at drawing an id that is not already taken
MAX_ID_ATTEMPTS = 3


def to_dto(student: Student) -> StudentDTO:
    """Convert a Student entity to its external representation."""
    return StudentDTO(
        id=student.id,
        name=student.name,
        id_number=student.id_number,
        email=student.email,
        enrollment_date=student.enrollment_date,
    )


def apply_dto(student: Student, dto: StudentDTO) -> None:
    """Copy every mutable field from the DTO onto the entity. The id is kept."""
    student.name = dto.name
    student.id_number = dto.id_number
    student.email = dto.email
    student.enrollment_date = dto.enrollment_date


class StudentService:
    """Enforces student business rules and maps entities to DTOs.

    Rules checked here before the repository is touched:
    - ID numbers are unique, case-insensitively
    - Updates and deletes require the student to exist
    - New students get a fresh id that no stored student uses

    Every method returns an OperationResult; faults are logged and reported
    as failures instead of being raised.
    """

    def __init__(
        self,
        repository: StudentRepository,
        id_factory: Callable[[], UUID] = generate_id,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Store holding the students.
            id_factory: Source of new student ids.
        """
        self.repository = repository
        self._id_factory = id_factory

    def get_all(self) -> OperationResult[list[StudentDTO]]:
        """List every student."""
        try:
            result = self.repository.get_all()
            if not result.success:
                return OperationResult.fail(result.message)

            students = [to_dto(s) for s in result.data or []]
            return OperationResult.ok(students, "Students retrieved successfully")
        except Exception as e:
            logger.exception("Service error retrieving students")
            return OperationResult.fail(f"Service error retrieving students: {e}")

    def get_by_id(self, student_id: UUID) -> OperationResult[StudentDTO]:
        """Get one student by id."""
        try:
            result = self.repository.get_by_id(student_id)
            if not result.success or result.data is None:
                return OperationResult.fail(result.message)

            return OperationResult.ok(to_dto(result.data), "Student retrieved successfully")
        except Exception as e:
            logger.exception("Service error retrieving student %s", student_id)
            return OperationResult.fail(f"Service error retrieving student: {e}")

    def create(self, dto: StudentDTO | None) -> OperationResult[StudentDTO]:
        """Create a student from a DTO. Any id on the DTO is ignored.

        Returns:
            Success with the stored student (id included), or failure when the
            ID number is already taken.
        """
        if dto is None:
            return OperationResult.fail("Student data cannot be null")
        try:
            exists = self.repository.exists_by_id_number(dto.id_number)
            if not exists.success:
                return OperationResult.fail(f"Error checking student existence: {exists.message}")
            if exists.data:
                logger.info("Rejected duplicate ID number %s", dto.id_number)
                return OperationResult.fail("Student with this ID number already exists")

            student_id = self._new_id()
            if student_id is None:
                return OperationResult.fail("Could not generate a unique student id")

            student = Student(
                id=student_id,
                name=dto.name,
                id_number=dto.id_number,
                email=dto.email,
                enrollment_date=dto.enrollment_date,
            )
            added = self.repository.add(student)
            if not added.success or added.data is None:
                return OperationResult.fail(added.message)

            logger.info("Created student %s", student_id)
            return OperationResult.ok(to_dto(added.data), "Student created successfully")
        except Exception as e:
            logger.exception("Service error creating student")
            return OperationResult.fail(f"Service error creating student: {e}")

    def update(self, student_id: UUID, dto: StudentDTO | None) -> OperationResult[StudentDTO]:
        """Replace every mutable field of an existing student.

        The ID number is re-checked for uniqueness only when it actually
        changes; a change in letter case alone is not a conflict.
        """
        if dto is None:
            return OperationResult.fail("Student data cannot be null")
        try:
            current = self.repository.get_by_id(student_id)
            if not current.success or current.data is None:
                return OperationResult.fail(current.message)
            existing = current.data

            if normalize_id_number(existing.id_number) != normalize_id_number(dto.id_number):
                exists = self.repository.exists_by_id_number(dto.id_number, exclude_id=student_id)
                if not exists.success:
                    return OperationResult.fail(
                        f"Error checking ID number existence: {exists.message}"
                    )
                if exists.data:
                    logger.info("Rejected ID number change for student %s", student_id)
                    return OperationResult.fail(
                        "Another student with this ID number already exists"
                    )

            apply_dto(existing, dto)
            updated = self.repository.update(existing)
            if not updated.success or updated.data is None:
                return OperationResult.fail(updated.message)

            return OperationResult.ok(to_dto(updated.data), "Student updated successfully")
        except Exception as e:
            logger.exception("Service error updating student %s", student_id)
            return OperationResult.fail(f"Service error updating student: {e}")

    def delete(self, student_id: UUID) -> OperationResult[bool]:
        """Delete a student. Data is True on success, False otherwise."""
        try:
            exists = self.repository.exists_by_id(student_id)
            if not exists.success:
                return OperationResult.fail(
                    f"Error checking student existence: {exists.message}", data=False
                )
            if not exists.data:
                return OperationResult.fail("Student not found", data=False)

            deleted = self.repository.delete(student_id)
            if not deleted.success:
                return OperationResult.fail(deleted.message, data=False)

            return OperationResult.ok(True, "Student deleted successfully")
        except Exception as e:
            logger.exception("Service error deleting student %s", student_id)
            return OperationResult.fail(f"Service error deleting student: {e}", data=False)

    def _new_id(self) -> UUID | None:
        """Draw ids until one is unused. None if every attempt collided."""
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            taken = self.repository.exists_by_id(candidate)
            if taken.success and not taken.data:
                return candidate
            logger.warning("Generated student id %s is already taken, retrying", candidate)
        return None
