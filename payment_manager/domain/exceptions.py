"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Input is missing a required field or carries an invalid value"""

    pass


class NotFoundError(DomainException):
    """No record matches the requested identifier"""

    pass


class StorageError(DomainException):
    """Underlying data store failed or is unreachable"""

    pass
