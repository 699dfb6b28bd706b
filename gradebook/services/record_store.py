"""
Record store enforcing referential integrity between students, courses and grades.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from ..core.entities import Student, Course, Grade, normalize_course_code
from ..core.exceptions import InvalidArgumentError, ResourceNotFoundError, DuplicateEntityError

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class RecordStore:
    """Authoritative in-memory collections of students, courses and grades.

    Students are keyed by their exact ID, courses by their normalized code.
    Every grade references a student and a course that are both present:
    removing either one first purges the grades that reference it.
    """

    def __init__(self):
        self._students: Dict[str, Student] = {}  # student_id -> Student
        self._courses: Dict[str, Course] = {}  # normalized course_code -> Course
        self._grades: List[Grade] = []
        self._lock = threading.RLock()

    # Students

    def add_student(self, student: Student) -> None:
        """Add a student. Raises if the student is None or its ID is taken."""
        with self._lock:
            if student is None:
                raise InvalidArgumentError("Student cannot be null")
            if student.student_id in self._students:
                logger.warning("Rejected duplicate student %s", student.student_id)
                raise DuplicateEntityError(
                    f"Student with ID {student.student_id} already exists",
                    error_code="duplicate_student",
                    details={'student_id': student.student_id}
                )
            self._students[student.student_id] = student
            logger.debug("Added student %s", student.student_id)

    def remove_student(self, student_id: str) -> bool:
        """Remove a student and all of their grades. Returns False if not found."""
        if _is_blank(student_id):
            return False
        with self._lock:
            purged = self._purge_grades(lambda grade: grade.student.student_id == student_id)
            removed = self._students.pop(student_id, None) is not None
            if purged:
                logger.info("Removed %d grade(s) for student %s", purged, student_id)
            if removed:
                logger.debug("Removed student %s", student_id)
            return removed

    def get_student(self, student_id: str) -> Optional[Student]:
        """Get a student by exact ID, or None."""
        with self._lock:
            return self._students.get(student_id)

    def get_all_students(self) -> List[Student]:
        """Get a snapshot of all students."""
        with self._lock:
            return list(self._students.values())

    # Courses

    def add_course(self, course: Course) -> None:
        """Add a course. Raises if the course is None or its code is taken."""
        with self._lock:
            if course is None:
                raise InvalidArgumentError("Course cannot be null")
            if course.course_code in self._courses:
                logger.warning("Rejected duplicate course %s", course.course_code)
                raise DuplicateEntityError(
                    f"Course with code {course.course_code} already exists",
                    error_code="duplicate_course",
                    details={'course_code': course.course_code}
                )
            self._courses[course.course_code] = course
            logger.debug("Added course %s", course.course_code)

    def remove_course(self, course_code: str) -> bool:
        """Remove a course and all grades recorded in it. Returns False if not found."""
        if _is_blank(course_code):
            return False
        normalized_code = normalize_course_code(course_code)
        with self._lock:
            purged = self._purge_grades(lambda grade: grade.course.course_code == normalized_code)
            removed = self._courses.pop(normalized_code, None) is not None
            if purged:
                logger.info("Removed %d grade(s) for course %s", purged, normalized_code)
            if removed:
                logger.debug("Removed course %s", normalized_code)
            return removed

    def get_course(self, course_code: str) -> Optional[Course]:
        """Get a course by code (case and surrounding whitespace ignored), or None."""
        if course_code is None:
            return None
        with self._lock:
            return self._courses.get(normalize_course_code(course_code))

    def get_all_courses(self) -> List[Course]:
        """Get a snapshot of all courses."""
        with self._lock:
            return list(self._courses.values())

    # Grades

    def record_grade(self, student_id: str, course_code: str, grade_value: float) -> Grade:
        """Record a student's grade in a course, replacing any earlier grade for the pair."""
        with self._lock:
            student = self._require_student(student_id)
            course = self._require_course(course_code)

            # Validate before touching the existing grade
            grade = Grade(student, course, grade_value)

            replaced = self._purge_grades(
                lambda existing: (existing.student.student_id == student.student_id and
                                  existing.course.course_code == course.course_code)
            )
            self._grades.append(grade)
            logger.debug("%s grade %s for %s in %s",
                         "Replaced" if replaced else "Recorded",
                         grade.grade_value, student.student_id, course.course_code)
            return grade

    def get_all_grades(self) -> List[Grade]:
        """Get a snapshot of all grades."""
        with self._lock:
            return list(self._grades)

    def get_grades_for_student(self, student_id: str) -> List[Grade]:
        """Get all grades recorded for a student."""
        with self._lock:
            return [grade for grade in self._grades if grade.student.student_id == student_id]

    def get_grades_for_course(self, course_code: str) -> List[Grade]:
        """Get all grades recorded in a course."""
        if course_code is None:
            return []
        normalized_code = normalize_course_code(course_code)
        with self._lock:
            return [grade for grade in self._grades if grade.course.course_code == normalized_code]

    # Aggregates

    def calculate_gpa(self, student_id: str) -> float:
        """Credit-weighted mean of grade points. 0.0 when the student has no grades."""
        with self._lock:
            self._require_student(student_id)
            student_grades = self.get_grades_for_student(student_id)
            if not student_grades:
                return 0.0

            total_points = 0.0
            total_credits = 0
            for grade in student_grades:
                credits = grade.course.credits
                total_points += grade.grade_points * credits
                total_credits += credits

            return total_points / total_credits if total_credits > 0 else 0.0

    def calculate_course_average(self, course_code: str) -> float:
        """Arithmetic mean of raw grade values. 0.0 when the course has no grades."""
        with self._lock:
            course = self._require_course(course_code)
            course_grades = self.get_grades_for_course(course.course_code)
            if not course_grades:
                return 0.0
            return sum(grade.grade_value for grade in course_grades) / len(course_grades)

    def get_statistics(self) -> Dict[str, Any]:
        """Get record store statistics."""
        with self._lock:
            average_grade = (
                sum(grade.grade_value for grade in self._grades) / len(self._grades)
                if self._grades else 0.0
            )
            return {
                'total_students': len(self._students),
                'total_courses': len(self._courses),
                'total_grades': len(self._grades),
                'average_grade': average_grade
            }

    def _require_student(self, student_id: str) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise ResourceNotFoundError(
                f"Student with ID {student_id} not found",
                error_code="student_not_found",
                details={'student_id': student_id}
            )
        return student

    def _require_course(self, course_code: str) -> Course:
        course = self._courses.get(normalize_course_code(course_code))
        if course is None:
            raise ResourceNotFoundError(
                f"Course with code {course_code} not found",
                error_code="course_not_found",
                details={'course_code': course_code}
            )
        return course

    def _purge_grades(self, predicate) -> int:
        """Drop every grade matching predicate. Returns how many were dropped."""
        before = len(self._grades)
        self._grades = [grade for grade in self._grades if not predicate(grade)]
        return before - len(self._grades)
