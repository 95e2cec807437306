"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputException(DomainException):
    """Raised when a sizing field is missing, non-numeric, non-finite or non-positive"""
    pass


class RegionNotFoundException(InvalidInputException):
    """Raised when the region key is not in the rainfall table"""
    pass


class ReportExportException(DomainException):
    """Raised when the PDF report cannot be rendered or written"""
    pass
