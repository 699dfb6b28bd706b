"""
Enumerations and constants for the Gradebook package.
"""

from enum import Enum

MIN_GRADE_VALUE = 0.0
MAX_GRADE_VALUE = 100.0


class LetterGrade(Enum):
    """Letter grades with the minimum score and grade points of each band."""
    A = ("A", 90.0, 4.0)
    B = ("B", 80.0, 3.0)
    C = ("C", 70.0, 2.0)
    D = ("D", 60.0, 1.0)
    F = ("F", 0.0, 0.0)

    def __init__(self, letter: str, min_score: float, points: float):
        self.letter = letter
        self.min_score = min_score
        self.points = points

    @classmethod
    def from_score(cls, score: float) -> "LetterGrade":
        """Map a raw score to its band, checking from the top band down."""
        for grade in cls:
            if score >= grade.min_score:
                return grade
        return cls.F
