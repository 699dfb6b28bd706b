"""
Custom exceptions for the Gradebook package.
"""

from typing import Optional, Any, Dict


class GradebookException(Exception):
    """Base exception for all Gradebook-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class InvalidArgumentError(GradebookException, ValueError):
    """Raised when an argument is missing, malformed, or out of range."""
    pass


class ResourceNotFoundError(InvalidArgumentError):
    """Raised when an operation references a student or course that does not exist."""
    pass


class DuplicateEntityError(InvalidArgumentError):
    """Raised when attempting to add an entity whose key already exists."""
    pass


class ConfigurationError(GradebookException):
    """Raised when configuration is invalid."""
    pass
