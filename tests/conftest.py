# tests/conftest.py

import pytest

from models.grade_entry import GradeEntry
from models.student_record import StudentRecord


@pytest.fixture
def empty_record():
    return StudentRecord("Alice", "1001")


@pytest.fixture
def sample_record():
    record = StudentRecord("Alice", "1001")
    record.add_grade("Math", "3", "92")
    record.add_grade("Physics", "4", "85")
    return record


@pytest.fixture
def sample_entry():
    return GradeEntry(3, 92)
