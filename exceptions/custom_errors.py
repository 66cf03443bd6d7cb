from utils.constants import CONFLICT_ERROR_CODE, CONFLICT_ERROR_MESSAGE


class CriteriaConflictError(Exception):
    """Raised when the declared total cannot accommodate the class counts, even after combining classes."""

    def __init__(self, message: str = CONFLICT_ERROR_MESSAGE, code: str = CONFLICT_ERROR_CODE):
        super().__init__(message)
        self.message = message
        self.code = code


class IncompatibleCriteriaError(Exception):
    """Raised when two class criteria have a pair of disjoint ranges and cannot be merged."""

    pass


class UnknownClassError(Exception):
    """Raised when a class-name token has no registered criteria."""

    pass


class ClassCriteriaConfigError(Exception):
    """Raised when the class criteria configuration cannot be read or is invalid."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    CriteriaConflictError: 422,
    UnknownClassError: 404,
    ClassCriteriaConfigError: 500,
}
