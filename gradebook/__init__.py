"""
Gradebook: An In-Memory Academic Records Manager

Tracks students, courses, and the grade a student earned in a course, and
derives per-student GPA and per-course averages. Ships with a REST API and
a small platform entry point for running it as a service.
"""

__version__ = "1.0.0"
__author__ = "Gradebook Development Team"
__description__ = "In-memory academic records manager"
