"""
Core entities for the Gradebook package.

Students, courses and grades are immutable once constructed: every field is
validated in ``__init__`` and exposed through read-only properties.
"""

import math
from numbers import Real
from typing import Any, Dict, Optional

from .enums import LetterGrade, MIN_GRADE_VALUE, MAX_GRADE_VALUE
from .exceptions import InvalidArgumentError


def normalize_course_code(course_code: Optional[str]) -> Optional[str]:
    """Trim and upper-case a course code. ``None`` passes through."""
    if course_code is None:
        return None
    return course_code.strip().upper()


def _require_text(value: Optional[str], label: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{label} cannot be null or empty")
    return value.strip()


class Student:
    """Student entity identified by its student ID."""

    def __init__(self, student_id: str, name: str, email: str):
        self._student_id = _require_text(student_id, "Student ID")
        self._name = _require_text(name, "Name")
        self._email = _require_text(email, "Email")

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        return {
            'student_id': self._student_id,
            'name': self._name,
            'email': self._email,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id == other._student_id

    def __hash__(self) -> int:
        return hash(self._student_id)

    def __str__(self) -> str:
        return f"Student(student_id={self._student_id}, name={self._name}, email={self._email})"

    def __repr__(self) -> str:
        return f"Student(student_id={self._student_id!r}, name={self._name!r}, email={self._email!r})"


class Course:
    """Course entity identified by its normalized course code."""

    def __init__(self, course_code: str, course_name: str, credits: int):
        code = _require_text(course_code, "Course code")
        self._course_name = _require_text(course_name, "Course name")
        if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
            raise InvalidArgumentError("Credits must be positive")
        self._course_code = normalize_course_code(code)
        self._credits = credits

    @property
    def course_code(self) -> str:
        return self._course_code

    @property
    def course_name(self) -> str:
        return self._course_name

    @property
    def credits(self) -> int:
        return self._credits

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        return {
            'course_code': self._course_code,
            'course_name': self._course_name,
            'credits': self._credits,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._course_code == other._course_code

    def __hash__(self) -> int:
        return hash(self._course_code)

    def __str__(self) -> str:
        return f"Course(course_code={self._course_code}, course_name={self._course_name}, credits={self._credits})"

    def __repr__(self) -> str:
        return (f"Course(course_code={self._course_code!r}, course_name={self._course_name!r}, "
                f"credits={self._credits})")


class Grade:
    """Immutable grade of one student in one course.

    Letter grade and grade points are derived from ``grade_value`` on every
    access; nothing beyond the raw value is stored.
    """

    def __init__(self, student: Student, course: Course, grade_value: float):
        if student is None:
            raise InvalidArgumentError("Student cannot be null")
        if course is None:
            raise InvalidArgumentError("Course cannot be null")
        if (isinstance(grade_value, bool) or not isinstance(grade_value, Real)
                or math.isnan(grade_value)
                or not MIN_GRADE_VALUE <= grade_value <= MAX_GRADE_VALUE):
            raise InvalidArgumentError("Grade value must be between 0.0 and 100.0")
        self._student = student
        self._course = course
        self._grade_value = float(grade_value)

    @property
    def student(self) -> Student:
        return self._student

    @property
    def course(self) -> Course:
        return self._course

    @property
    def grade_value(self) -> float:
        return self._grade_value

    @property
    def letter_grade(self) -> str:
        """Letter grade (A, B, C, D, F) for the raw value."""
        return LetterGrade.from_score(self._grade_value).letter

    @property
    def grade_points(self) -> float:
        """Grade points on the 4.0 scale for the raw value."""
        return LetterGrade.from_score(self._grade_value).points

    def to_dict(self) -> Dict[str, Any]:
        """Convert grade to dictionary."""
        return {
            'student_id': self._student.student_id,
            'course_code': self._course.course_code,
            'grade_value': self._grade_value,
            'letter_grade': self.letter_grade,
            'grade_points': self.grade_points,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grade):
            return NotImplemented
        return (self._student == other._student
                and self._course == other._course
                and self._grade_value == other._grade_value)

    def __hash__(self) -> int:
        return hash((self._student, self._course, self._grade_value))

    def __str__(self) -> str:
        return (f"Grade(student={self._student.name}, course={self._course.course_code}, "
                f"grade_value={self._grade_value}, letter_grade={self.letter_grade})")

    def __repr__(self) -> str:
        return (f"Grade(student={self._student.student_id!r}, course={self._course.course_code!r}, "
                f"grade_value={self._grade_value})")
