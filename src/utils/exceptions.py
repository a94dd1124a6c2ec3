"""Custom exception classes."""


class RegistrationError(Exception):
    """Base class for registration failures."""
    pass


class ValidationError(RegistrationError):
    """Raised when a submission fails validation (client-correctable)."""
    pass


class MissingRequiredFieldError(ValidationError):
    """Raised when name, email or registration type is missing or invalid."""
    pass


class MissingCompanyError(ValidationError):
    """Raised when a professional registration has no company."""
    pass


class StoreFailureError(RegistrationError):
    """Raised when the record store cannot be read or written."""
    pass


class ApiClientError(Exception):
    """Raised when the registration API cannot be reached."""
    pass
