# models/grade_entry.py

"""
Represents the result a student earned in one course.

Each `GradeEntry` records the course credit and the numeric score, and derives the
grade point from the score using the fixed `GRADE_POINT_SCALE` table.

Includes functionality for:
- Validating credit and score input
- Converting a score to a grade point
- Serializing to and from JSON-compatible dictionaries

Notes:
- Entries are immutable once created; replace an entry to change it.
- The scale breakpoints are non-uniform, so the lookup is a table rather than a formula.
"""

from __future__ import annotations

from typing import Any

from core.errors import InvalidArgumentError
from core.utils import parse_int_input

MIN_SCORE = 0
MAX_SCORE = 100

# (minimum score, grade point), checked top-down
GRADE_POINT_SCALE: tuple[tuple[int, float], ...] = (
    (90, 4.0),
    (85, 3.7),
    (82, 3.3),
    (78, 3.0),
    (75, 2.7),
    (72, 2.3),
    (68, 2.0),
    (64, 1.5),
    (60, 1.0),
)
FAILING_GRADE_POINT = 0.0


def grade_point_for(score: int) -> float:
    for minimum, grade_point in GRADE_POINT_SCALE:
        if score >= minimum:
            return grade_point
    return FAILING_GRADE_POINT


class GradeEntry:

    def __init__(self, credit: int | str, score: int | str):
        self._credit: int = GradeEntry.validate_credit_input(credit)
        self._score: int = GradeEntry.validate_score_input(score)
        self._grade_point: float = grade_point_for(self._score)

    # === properties ===

    @property
    def credit(self) -> int:
        return self._credit

    @property
    def score(self) -> int:
        return self._score

    @property
    def grade_point(self) -> float:
        return self._grade_point

    @property
    def weighted_grade_point(self) -> float:
        return self._credit * self._grade_point

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "credit": self._credit,
            "score": self._score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradeEntry:
        return cls(
            credit=data["credit"],
            score=data["score"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradeEntry):
            return NotImplemented
        return self._credit == other._credit and self._score == other._score

    def __hash__(self) -> int:
        return hash((self._credit, self._score))

    def __repr__(self) -> str:
        return f"GradeEntry({self._credit}, {self._score})"

    def __str__(self) -> str:
        return f"GRADE: credit: {self._credit}, score: {self._score}, grade point: {self._grade_point:.2f}"

    # === data validators ===

    @staticmethod
    def validate_credit_input(credit: Any) -> int:
        """
        Validates and normalizes input for a `GradeEntry` credit.

        Accepts integer text or an int, and then:
            - Parses to int.
            - Ensures it is greater than zero.

        Args:
            credit (Any): The input value to validate.

        Returns:
            The normalized credit value (int).

        Raises:
            InvalidArgumentError: If the input is not an integer or is not positive.
        """
        credit = parse_int_input(credit, "credit")

        if credit <= 0:
            raise InvalidArgumentError("credit", "Credit must be a positive integer.")

        return credit

    @staticmethod
    def validate_score_input(score: Any) -> int:
        """
        Validates and normalizes input for a `GradeEntry` score.

        Raises:
            InvalidArgumentError: If the input is not an integer between 0 and 100.
        """
        score = parse_int_input(score, "score")

        if score < MIN_SCORE or score > MAX_SCORE:
            raise InvalidArgumentError(
                "score",
                f"Score must be an integer between {MIN_SCORE} and {MAX_SCORE}.",
            )

        return score
