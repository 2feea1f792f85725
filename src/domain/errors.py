from __future__ import annotations


class BoardError(Exception):
    """Base class for domain failures raised by the board service."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(BoardError):
    """Raised when a referenced member or assignment does not exist."""

    status_code = 404


class RoleMismatchError(BoardError):
    """Raised when a member lacks the role an assignment requires."""


class InvalidTransitionError(BoardError):
    """Raised when an assignment is not in the status a transition requires."""


class BoardValidationError(BoardError):
    """Raised when malformed input reaches the board service."""


class BoardStorageError(Exception):
    """Raised when the persisted board cannot be read or written."""
