"""
Core module containing the entity model, grading scale and exceptions.
"""

from .entities import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "Student",
    "Course",
    "Grade",
    "normalize_course_code",
    
    # Enums
    "LetterGrade",
    "MIN_GRADE_VALUE",
    "MAX_GRADE_VALUE",
    
    # Exceptions
    "GradebookException",
    "InvalidArgumentError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
]
