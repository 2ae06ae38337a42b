"""Custom exceptions for Student Records."""


class StudentRecordsError(Exception):
    """Base exception for Student Records errors."""


class ConfigError(StudentRecordsError):
    """Configuration is invalid or incomplete."""
