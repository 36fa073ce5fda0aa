# models/student_record.py

"""
Represents one student's academic record.

Stores the student's name and numeric ID along with a `GradeEntry` for every course
taken, keyed by course name. Adding a course that is already on the record replaces
its entry.

Includes functionality for:
- Validating identity and grade input
- Adding and removing grades, singly or in batches
- Computing total credit, total grade points, and GPA
- Rendering a human-readable report
- Serializing to and from JSON-compatible dictionaries

Notes:
- `id` is read-only after construction. `name` may be reassigned, and the setter
  applies the same validation as the constructor.
- Batch operations apply elements in order and stop at the first failure. Elements
  applied before the failure stay applied.
- Not safe for concurrent mutation; callers must serialize access.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import core.formatters as formatters
from core.errors import CourseNotFoundError, ErrorCode, InvalidArgumentError
from core.utils import parse_int_input, require_text
from models.grade_entry import GradeEntry

logger = logging.getLogger(__name__)


class StudentRecord:

    def __init__(self, name: str, id: str | int):
        # both validated before any state is set
        validated_name = StudentRecord.validate_name_input(name)
        validated_id = StudentRecord.validate_id_input(id)

        self._name: str = validated_name
        self._id: int = validated_id
        self._courses: dict[str, GradeEntry] = {}

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = StudentRecord.validate_name_input(name)

    @property
    def id(self) -> int:
        return self._id

    @property
    def courses(self) -> dict[str, GradeEntry]:
        return self._courses.copy()

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "id": self._id,
            "courses": {
                course: entry.to_dict() for course, entry in self._courses.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> StudentRecord:
        record = cls(
            name=data["name"],
            id=data["id"],
        )

        for course, entry in data.get("courses", {}).items():
            record.add_grade(course, entry["credit"], entry["score"])

        return record

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"StudentRecord({self._name}, {self._id}, {len(self._courses)} courses)"

    def __str__(self) -> str:
        return self.render()

    # === data accessors ===

    def has_course(self, course: str) -> bool:
        return course in self._courses

    def grade_for(self, course: str) -> GradeEntry | None:
        return self._courses.get(course)

    def get_total_credit(self) -> int:
        return sum(entry.credit for entry in self._courses.values())

    def get_total_grade_point(self) -> float:
        # credit-weighted sum of grade points
        return sum(
            (entry.weighted_grade_point for entry in self._courses.values()), 0.0
        )

    def get_gpa(self) -> float:
        total_credit = self.get_total_credit()
        if total_credit == 0:
            return 0.0
        return self.get_total_grade_point() / total_credit

    def render(self) -> str:
        """
        Renders a multi-line report of the record.

        Courses are listed in ascending code point order of course name (so "Chemistry"
        sorts before "biology"), each with its credit, score, and grade point. Totals
        close the report. Every line ends with a newline.
        """
        lines = [formatters.format_student_header(self._name, self._id)]

        if not self._courses:
            lines.append("No grades recorded.")
        else:
            lines.append("Courses:")
            for course in sorted(self._courses):
                entry = self._courses[course]
                lines.append(
                    formatters.format_course_line(
                        course, entry.credit, entry.score, entry.grade_point
                    )
                )

        lines.extend(formatters.format_totals(self.get_total_credit(), self.get_gpa()))

        return "".join(f"{line}\n" for line in lines)

    # === data manipulators ===

    def add_grade(self, course: str, credit: str | int, score: str | int) -> None:
        """
        Adds a grade for `course`, replacing any existing entry for it.

        Validation runs in order: course, credit, score. The first failure is raised
        and the record is left unchanged.

        Raises:
            InvalidArgumentError: If any field fails validation.
        """
        course = StudentRecord.validate_course_input(course)
        entry = GradeEntry(credit, score)

        replaced = course in self._courses
        self._courses[course] = entry

        logger.debug(
            "%s grade for %s on record %d: %r",
            "Replaced" if replaced else "Added",
            course,
            self._id,
            entry,
        )

    def add_grades(self, grades: Iterable[tuple[str, int, int]] | None) -> None:
        """
        Adds a batch of `(course, credit, score)` grades in order.

        Stops at the first invalid element. Grades added before it are kept.

        Raises:
            InvalidArgumentError: If `grades` is None or any element is invalid.
        """
        if grades is None:
            raise InvalidArgumentError(
                "grades", "Grades cannot be None.", ErrorCode.MISSING_REQUIRED_FIELD
            )

        for item in grades:
            course, credit, score = StudentRecord._unpack_grade_item(item)
            self.add_grade(course, str(credit), str(score))

    def remove_grade(self, course: str) -> None:
        """
        Removes the entry for `course`.

        Raises:
            InvalidArgumentError: If `course` is blank.
            CourseNotFoundError: If `course` is not on the record.
        """
        course = StudentRecord.validate_course_input(course)

        if course not in self._courses:
            raise CourseNotFoundError(course)

        del self._courses[course]
        logger.debug("Removed grade for %s on record %d", course, self._id)

    def remove_grades(self, courses: Iterable[str] | None) -> None:
        """
        Removes a batch of courses in order.

        Stops at the first blank or missing course. Courses removed before it stay removed.

        Raises:
            InvalidArgumentError: If `courses` is None or a bare string, or if it
                contains a blank name.
            CourseNotFoundError: If a course is not on the record.
        """
        if courses is None:
            raise InvalidArgumentError(
                "courses", "Courses cannot be None.", ErrorCode.MISSING_REQUIRED_FIELD
            )

        if isinstance(courses, str):
            raise InvalidArgumentError(
                "courses", "Expected a collection of course names, got a single name."
            )

        for course in courses:
            self.remove_grade(course)

    # === data validators ===

    @staticmethod
    def validate_name_input(name: Any) -> str:
        return require_text(name, "name", "Name")

    @staticmethod
    def validate_id_input(id: Any) -> int:
        """
        Validates and normalizes a student ID.

        Args:
            id (Any): Integer text or an int.

        Returns:
            The parsed ID (int).

        Raises:
            InvalidArgumentError: If the ID is not an integer greater than zero.
        """
        try:
            id = parse_int_input(id, "id")

        except InvalidArgumentError as e:
            raise InvalidArgumentError(
                "id", "ID must be a positive integer.", e.error
            ) from None

        if id <= 0:
            raise InvalidArgumentError("id", "ID must be a positive integer.")

        return id

    @staticmethod
    def validate_course_input(course: Any) -> str:
        return require_text(course, "course", "Course name")

    @staticmethod
    def _unpack_grade_item(item: Any) -> tuple[Any, Any, Any]:
        try:
            if isinstance(item, str):
                raise TypeError
            course, credit, score = item

        except (TypeError, ValueError):
            raise InvalidArgumentError(
                "grades", f"Expected a (course, credit, score) entry, got {item!r}."
            ) from None

        return course, credit, score
