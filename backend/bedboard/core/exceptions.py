"""
Application exceptions.
Semantic exceptions that routers translate into HTTP errors.
"""


class BaseAppException(Exception):
    """
    Base application exception.
    Every custom exception inherits from this one.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# FORM VALIDATION ERRORS
# ============================================

class FormValidationError(BaseAppException):
    """Client-side form validation failure."""
    def __init__(self, message: str, field: str = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class RequiredFieldError(FormValidationError):
    """A required field is missing."""
    pass


class PatternMismatchError(FormValidationError):
    """A field does not match its expected pattern."""
    def __init__(self, field: str, value: str, expected: str):
        super().__init__(
            f"Invalid {field} '{value}'. Expected {expected}",
            field
        )
        self.value = value
        self.expected = expected


class CrossFieldError(FormValidationError):
    """Two or more fields violate a joint constraint."""
    pass


class TransferValidationError(RequiredFieldError):
    """Transfer submission is missing patient, destination bed or reason."""
    pass


class InvalidStateError(BaseAppException):
    """Operation not allowed in the current state."""
    def __init__(self, message: str):
        super().__init__(message, "INVALID_STATE")


# ============================================
# NOT FOUND ERRORS
# ============================================

class NotFoundError(BaseAppException):
    """Resource not found."""
    def __init__(self, resource: str, identifier: str):
        super().__init__(
            f"{resource} with identifier '{identifier}' not found",
            "NOT_FOUND"
        )
        self.resource = resource
        self.identifier = identifier


class BedNotFoundError(NotFoundError):
    """Bed not found."""
    def __init__(self, bed_id: str):
        super().__init__("Bed", bed_id)


class PatientNotFoundError(NotFoundError):
    """Patient not found."""
    def __init__(self, patient_id: str):
        super().__init__("Patient", patient_id)


class SessionNotFoundError(NotFoundError):
    """Board session not found (closed or never opened)."""
    def __init__(self, session_id: str):
        super().__init__("Session", session_id)


# ============================================
# BED STATE ERRORS
# ============================================

class BedNotOccupiedError(BaseAppException):
    """The operation needs an occupied bed."""
    def __init__(self, bed_id: str, current_status: str):
        super().__init__(
            f"Bed {bed_id} is not occupied. Current status: {current_status}",
            "BED_NOT_OCCUPIED"
        )
        self.bed_id = bed_id
        self.current_status = current_status


class CatalogIntegrityError(BaseAppException):
    """The data store returned a bed that breaks a catalog invariant."""
    def __init__(self, message: str):
        super().__init__(message, "CATALOG_INTEGRITY")
