import math

import pytest

from gradebook.core.entities import Student, Course, Grade, normalize_course_code
from gradebook.core.enums import LetterGrade
from gradebook.core.exceptions import InvalidArgumentError, GradebookException


# --- Student ---

def test_create_valid_student():
    student = Student("S001", "John Doe", "john.doe@example.com")
    assert student.student_id == "S001"
    assert student.name == "John Doe"
    assert student.email == "john.doe@example.com"


def test_student_fields_are_trimmed_and_case_preserved():
    student = Student(" s001 ", " John Doe ", " john.doe@example.com ")
    assert student.student_id == "s001"
    assert student.name == "John Doe"
    assert student.email == "john.doe@example.com"


@pytest.mark.parametrize("student_id, name, email, message", [
    (None, "John Doe", "j@example.com", "Student ID cannot be null or empty"),
    ("  ", "John Doe", "j@example.com", "Student ID cannot be null or empty"),
    ("S001", None, "j@example.com", "Name cannot be null or empty"),
    ("S001", "", "j@example.com", "Name cannot be null or empty"),
    ("S001", "John Doe", None, "Email cannot be null or empty"),
    ("S001", "John Doe", "\t", "Email cannot be null or empty"),
])
def test_student_rejects_missing_fields(student_id, name, email, message):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Student(student_id, name, email)
    assert str(exc_info.value) == message


def test_student_is_read_only():
    student = Student("S001", "John Doe", "john.doe@example.com")
    with pytest.raises(AttributeError):
        student.name = "Someone Else"


def test_student_equality_by_id():
    a = Student("S001", "John Doe", "john.doe@example.com")
    b = Student("S001", "Other Name", "other@example.com")
    c = Student("S002", "John Doe", "john.doe@example.com")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert a != "S001"


def test_student_str():
    text = str(Student("S001", "John Doe", "john.doe@example.com"))
    assert "S001" in text and "John Doe" in text and "john.doe@example.com" in text


# --- Course ---

def test_create_valid_course():
    course = Course("CS101", "Introduction to Computer Science", 3)
    assert course.course_code == "CS101"
    assert course.course_name == "Introduction to Computer Science"
    assert course.credits == 3


def test_course_code_is_normalized():
    course = Course(" cs101 ", " Intro ", 3)
    assert course.course_code == "CS101"
    assert course.course_name == "Intro"


@pytest.mark.parametrize("code, name, credits, message", [
    (None, "Intro", 3, "Course code cannot be null or empty"),
    (" ", "Intro", 3, "Course code cannot be null or empty"),
    ("CS101", None, 3, "Course name cannot be null or empty"),
    ("CS101", "  ", 3, "Course name cannot be null or empty"),
    ("CS101", "Intro", 0, "Credits must be positive"),
    ("CS101", "Intro", -2, "Credits must be positive"),
    ("CS101", "Intro", True, "Credits must be positive"),
    ("CS101", "Intro", 3.5, "Credits must be positive"),
])
def test_course_rejects_invalid_fields(code, name, credits, message):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Course(code, name, credits)
    assert str(exc_info.value) == message


def test_course_equality_by_normalized_code():
    assert Course("cs101", "Intro", 3) == Course("CS101", "Something Else", 4)
    assert hash(Course("cs101", "Intro", 3)) == hash(Course(" CS101", "Intro", 3))
    assert Course("CS101", "Intro", 3) != Course("CS102", "Intro", 3)


def test_normalize_course_code():
    assert normalize_course_code(" Cs101 ") == "CS101"
    assert normalize_course_code(None) is None


# --- Grade ---

def test_create_valid_grade(student1, cs101):
    grade = Grade(student1, cs101, 85.5)
    assert grade.student == student1
    assert grade.course == cs101
    assert grade.grade_value == 85.5


def test_grade_accepts_boundaries_and_ints(student1, cs101):
    assert Grade(student1, cs101, 0.0).grade_value == 0.0
    assert Grade(student1, cs101, 100).grade_value == 100.0
    assert isinstance(Grade(student1, cs101, 100).grade_value, float)


def test_grade_rejects_null_references(student1, cs101):
    with pytest.raises(InvalidArgumentError, match="Student cannot be null"):
        Grade(None, cs101, 85.5)
    with pytest.raises(InvalidArgumentError, match="Course cannot be null"):
        Grade(student1, None, 85.5)


@pytest.mark.parametrize("value", [-1.0, -0.001, 100.001, 101.0, math.nan, "85", None])
def test_grade_rejects_out_of_range(student1, cs101, value):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Grade(student1, cs101, value)
    assert str(exc_info.value) == "Grade value must be between 0.0 and 100.0"


@pytest.mark.parametrize("value, letter, points", [
    (100.0, "A", 4.0),
    (95.0, "A", 4.0),
    (90.0, "A", 4.0),
    (89.9, "B", 3.0),
    (80.0, "B", 3.0),
    (79.9, "C", 2.0),
    (70.0, "C", 2.0),
    (69.9, "D", 1.0),
    (60.0, "D", 1.0),
    (59.9, "F", 0.0),
    (0.0, "F", 0.0),
])
def test_letter_grade_and_points(student1, cs101, value, letter, points):
    grade = Grade(student1, cs101, value)
    assert grade.letter_grade == letter
    assert grade.grade_points == points


def test_letter_grade_scale_is_ordered_top_down():
    assert [g.letter for g in LetterGrade] == ["A", "B", "C", "D", "F"]
    assert LetterGrade.from_score(90.0) is LetterGrade.A
    assert LetterGrade.from_score(59.99) is LetterGrade.F


def test_grade_equality(student1, student2, cs101, math101):
    grade = Grade(student1, cs101, 85.5)
    assert grade == Grade(student1, cs101, 85.5)
    assert hash(grade) == hash(Grade(student1, cs101, 85.5))
    assert grade != Grade(student2, cs101, 85.5)
    assert grade != Grade(student1, math101, 85.5)
    assert grade != Grade(student1, cs101, 90.0)
    assert grade != None  # noqa: E711
    assert grade != "not a grade"


def test_grade_str(student1, cs101):
    text = str(Grade(student1, cs101, 85.5))
    for expected in ("Grade", "John Doe", "CS101", "85.5", "B"):
        assert expected in text


def test_grade_to_dict(student1, cs101):
    assert Grade(student1, cs101, 72.0).to_dict() == {
        'student_id': "S001",
        'course_code': "CS101",
        'grade_value': 72.0,
        'letter_grade': "C",
        'grade_points': 2.0,
    }


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        Student(None, "John Doe", "j@example.com")
    assert issubclass(InvalidArgumentError, GradebookException)
