"""Error types raised by the case service layer."""

from typing import Optional, Tuple


class CaseServiceError(Exception):
    """
    Base exception for failed calls to the case service.

    Attributes:
        operation: Short name of the failed operation ("list_cases", "create_case")
        cause: Original exception raised by the transport or decoder, if any
    """

    user_message = "The case service request failed."

    def __init__(self, operation: str, message: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        base = f"{self.operation}: {self.args[0]}"
        if self.cause is not None:
            base += f" ({type(self.cause).__name__}: {self.cause})"
        return base


class ListLoadFailure(CaseServiceError):
    """The case list could not be loaded."""

    user_message = "Failed to load cases. Please try again later."


class CreateFailure(CaseServiceError):
    """A new case could not be created."""

    user_message = "Failed to create case. Please try again."


class DraftIncompleteError(ValueError):
    """Raised when a draft is submitted with required fields left empty."""

    def __init__(self, missing: Tuple[str, ...]):
        self.missing = missing
        super().__init__(f"Draft is missing required fields: {', '.join(missing)}")
