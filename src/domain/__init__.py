"""Scrum board domain types."""

from src.domain.errors import (
    BoardError,
    BoardStorageError,
    BoardValidationError,
    InvalidTransitionError,
    NotFoundError,
    RoleMismatchError,
)
from src.domain.models import Assignment, AssignmentStatus, Board, Member, Role

__all__ = [
    "Assignment",
    "AssignmentStatus",
    "Board",
    "BoardError",
    "BoardStorageError",
    "BoardValidationError",
    "InvalidTransitionError",
    "Member",
    "NotFoundError",
    "Role",
    "RoleMismatchError",
]
