from enum import Enum


class FieldValidationError(ValueError):
    """A single field failed one of its rules."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class SubmitErrorKind(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    REJECTED = "rejected"


class SubmitError(RuntimeError):
    """
    Raised by a submit collaborator when the registration could not be delivered.
    """

    def __init__(self, kind: SubmitErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
