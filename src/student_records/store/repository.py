"""StudentRepository - thread-safe in-memory storage for students."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from student_records.store.models import OperationResult, Student, normalize_id_number

if TYPE_CHECKING:
    from uuid import UUID

logger = logging.getLogger(__name__)


class StudentRepository:
    """In-memory student collection guarded by a single lock.

    Students are kept in a dict keyed by id, alongside an index keyed by the
    lowercased ID number. Both are only touched while holding ``_lock``, so
    every operation sees and leaves them consistent with each other.

    Stored entities never leave the repository: reads return copies and
    writes store copies.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._students: dict[UUID, Student] = {}
        self._id_number_index: dict[str, UUID] = {}

    def get_all(self) -> OperationResult[list[Student]]:
        """Snapshot of all students, in insertion order."""
        try:
            with self._lock:
                students = [replace(s) for s in self._students.values()]
            return OperationResult.ok(students, "Students retrieved successfully")
        except Exception as e:
            logger.exception("Error retrieving students")
            return OperationResult.fail(f"Error retrieving students: {e}")

    def get_by_id(self, student_id: UUID) -> OperationResult[Student]:
        """Get a student by id.

        Returns:
            Success with a copy of the student, or failure "Student not found".
        """
        try:
            with self._lock:
                student = self._students.get(student_id)
                if student is None:
                    return OperationResult.fail("Student not found")
                return OperationResult.ok(replace(student), "Student found successfully")
        except Exception as e:
            logger.exception("Error retrieving student %s", student_id)
            return OperationResult.fail(f"Error retrieving student: {e}")

    def add(self, student: Student | None) -> OperationResult[Student]:
        """Insert a new student.

        Fails if another student already holds the same ID number
        (case-insensitive) or the same id.
        """
        if student is None:
            return OperationResult.fail("Student cannot be null")
        try:
            key = normalize_id_number(student.id_number)
            with self._lock:
                if key in self._id_number_index:
                    return OperationResult.fail("Student with this ID number already exists")
                if student.id in self._students:
                    return OperationResult.fail("Student with this id already exists")

                self._students[student.id] = replace(student)
                self._id_number_index[key] = student.id
                total = len(self._students)
            logger.info("Added student %s (total=%d)", student.id, total)
            return OperationResult.ok(replace(student), "Student added successfully")
        except Exception as e:
            logger.exception("Error adding student")
            return OperationResult.fail(f"Error adding student: {e}")

    def update(self, student: Student | None) -> OperationResult[Student]:
        """Replace the stored student that has the same id.

        Fails if no such student exists, or if a different student already
        holds the new ID number.
        """
        if student is None:
            return OperationResult.fail("Student cannot be null")
        try:
            key = normalize_id_number(student.id_number)
            with self._lock:
                current = self._students.get(student.id)
                if current is None:
                    return OperationResult.fail("Student not found")

                holder = self._id_number_index.get(key)
                if holder is not None and holder != student.id:
                    return OperationResult.fail(
                        "Another student with this ID number already exists"
                    )

                del self._id_number_index[normalize_id_number(current.id_number)]
                self._id_number_index[key] = student.id
                self._students[student.id] = replace(student)
            logger.info("Updated student %s", student.id)
            return OperationResult.ok(replace(student), "Student updated successfully")
        except Exception as e:
            logger.exception("Error updating student %s", student.id)
            return OperationResult.fail(f"Error updating student: {e}")

    def delete(self, student_id: UUID) -> OperationResult[bool]:
        """Remove a student by id. Data is True when a student was removed."""
        try:
            with self._lock:
                student = self._students.pop(student_id, None)
                if student is None:
                    return OperationResult.fail("Student not found", data=False)
                del self._id_number_index[normalize_id_number(student.id_number)]
            logger.info("Deleted student %s", student_id)
            return OperationResult.ok(True, "Student deleted successfully")
        except Exception as e:
            logger.exception("Error deleting student %s", student_id)
            return OperationResult.fail(f"Error deleting student: {e}", data=False)

    def exists_by_id(self, student_id: UUID) -> OperationResult[bool]:
        """Check whether a student with this id exists."""
        try:
            with self._lock:
                exists = student_id in self._students
            message = "Student exists" if exists else "Student does not exist"
            return OperationResult.ok(exists, message)
        except Exception as e:
            logger.exception("Error checking student existence")
            return OperationResult.fail(f"Error checking student existence: {e}", data=False)

    def exists_by_id_number(
        self, id_number: str | None, exclude_id: UUID | None = None
    ) -> OperationResult[bool]:
        """Check whether a student holds this ID number (case-insensitive).

        Args:
            id_number: The ID number to look for. Blank input is an error.
            exclude_id: Ignore this student when checking, so a record does
                not conflict with itself.
        """
        if id_number is None or not id_number.strip():
            return OperationResult.fail("ID number cannot be null or empty", data=False)
        try:
            with self._lock:
                holder = self._id_number_index.get(normalize_id_number(id_number))
            exists = holder is not None and holder != exclude_id
            message = (
                "Student with ID number exists"
                if exists
                else "Student with ID number does not exist"
            )
            return OperationResult.ok(exists, message)
        except Exception as e:
            logger.exception("Error checking student existence by ID number")
            return OperationResult.fail(
                f"Error checking student existence by ID number: {e}", data=False
            )

    def count(self) -> int:
        """Number of stored students."""
        with self._lock:
            return len(self._students)

    def clear(self) -> None:
        """Remove every student."""
        with self._lock:
            self._students.clear()
            self._id_number_index.clear()
        logger.info("Cleared student store")
