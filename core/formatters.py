# core/formatters.py

# all pure text helpers
# must never import from models!

# === numeric formatters ===


def format_two_places(value: float) -> str:
    return f"{value:.2f}"


# === record formatters ===


def format_student_header(name: str, id: int) -> str:
    return f"Student: {name}, ID: {id}"


def format_course_line(course: str, credit: int, score: int, grade_point: float) -> str:
    return (
        f"  {course}: Credit={credit}, Score={score}, "
        f"Grade Point={format_two_places(grade_point)}"
    )


def format_totals(total_credit: int, gpa: float) -> list[str]:
    return [
        f"Total Credit: {total_credit}",
        f"GPA: {format_two_places(gpa)}",
    ]
