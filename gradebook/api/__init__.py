"""
API module for the REST API implementation.
"""

from .rest_api import GradebookRestAPI

__all__ = [
    "GradebookRestAPI",
]
