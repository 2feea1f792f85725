"""
Board service: the single owner of scrum board state.

Each operation runs a full load -> mutate -> validate -> save cycle against the
repository. Validation failures raise before save, so persisted state only
changes when an operation succeeds.
"""

from __future__ import annotations

import threading
import uuid
from collections.abc import Sequence

import structlog
from src.domain.errors import (
    BoardError,
    BoardValidationError,
    InvalidTransitionError,
    NotFoundError,
    RoleMismatchError,
)
from src.domain.models import Assignment, AssignmentStatus, Board, Member, Role
from src.infrastructure.storage.base import BoardRepository

logger = structlog.get_logger()


class BoardService:
    """Domain logic for members, assignments and their status transitions."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repository = repository
        # One load-mutate-save cycle at a time within this process.
        self._lock = threading.Lock()

    def get_board(self) -> Board:
        with self._lock:
            return self.repository.load()

    def add_member(self, name: str, roles: Sequence[str | Role]) -> Member:
        name = self._require_text(name, "Member name is required")
        parsed_roles = self._parse_roles(roles)

        with self._lock:
            board = self.repository.load()
            member = Member(
                id=_new_id({existing.id for existing in board.members}),
                name=name,
                roles=parsed_roles,
            )
            board.members.append(member)
            self.repository.save(board)

        logger.info(
            "member_created",
            member_id=member.id,
            roles=[role.value for role in member.roles],
        )
        return member

    def add_assignment(self, title: str, description: str, category: str | Role) -> Assignment:
        title = self._require_text(title, "Assignment title is required")
        description = self._require_text(description, "Description is required")
        parsed_category = self._parse_role(category, message="Invalid category")

        with self._lock:
            board = self.repository.load()
            assignment = Assignment(
                id=_new_id({existing.id for existing in board.assignments}),
                title=title,
                description=description,
                category=parsed_category,
            )
            board.assignments.append(assignment)
            self.repository.save(board)

        logger.info(
            "assignment_created",
            assignment_id=assignment.id,
            category=assignment.category.value,
        )
        return assignment

    def assign_task(self, assignment_id: str, member_id: str) -> None:
        with self._lock:
            board = self.repository.load()
            assignment = board.find_assignment(assignment_id)
            member = board.find_member(member_id)

            if assignment is None or member is None:
                raise self._reject(NotFoundError("Assignment or member not found"))
            if assignment.status not in AssignmentStatus.assignable_statuses():
                raise self._reject(
                    InvalidTransitionError("Completed assignments cannot be reassigned")
                )
            if not member.has_role(assignment.category):
                raise self._reject(
                    RoleMismatchError(
                        "Member does not have the required role for this assignment"
                    )
                )

            assignment.assigned = member.id
            assignment.status = AssignmentStatus.IN_PROGRESS
            self.repository.save(board)

        logger.info("assignment_assigned", assignment_id=assignment_id, member_id=member_id)

    def mark_as_done(self, assignment_id: str) -> None:
        with self._lock:
            board = self.repository.load()
            assignment = board.find_assignment(assignment_id)

            if assignment is None:
                raise self._reject(NotFoundError("Assignment not found"))
            if assignment.status != AssignmentStatus.IN_PROGRESS:
                raise self._reject(
                    InvalidTransitionError("Only in-progress assignments can be marked as done")
                )

            assignment.status = AssignmentStatus.DONE
            self.repository.save(board)

        logger.info("assignment_completed", assignment_id=assignment_id)

    def remove_done_task(self, assignment_id: str) -> None:
        with self._lock:
            board = self.repository.load()
            index = board.assignment_index(assignment_id)

            if index is None:
                raise self._reject(NotFoundError("Assignment not found"))
            if board.assignments[index].status != AssignmentStatus.DONE:
                raise self._reject(
                    InvalidTransitionError("Only completed assignments can be removed")
                )

            del board.assignments[index]
            self.repository.save(board)

        logger.info("assignment_removed", assignment_id=assignment_id)

    def _require_text(self, value: object, message: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise self._reject(BoardValidationError(message))
        return value.strip()

    def _parse_roles(self, roles: Sequence[str | Role] | None) -> list[Role]:
        if not isinstance(roles, (list, tuple)):
            raise self._reject(BoardValidationError("At least one role is required"))
        parsed: list[Role] = []
        for role in roles:
            value = self._parse_role(role, message="Invalid role")
            if value not in parsed:
                parsed.append(value)
        if not parsed:
            raise self._reject(BoardValidationError("At least one role is required"))
        return parsed

    def _parse_role(self, value: str | Role, *, message: str) -> Role:
        if isinstance(value, Role):
            return value
        if not isinstance(value, str) or not Role.contains(value):
            raise self._reject(BoardValidationError(message))
        return Role(value)

    def _reject(self, error: BoardError) -> BoardError:
        logger.warning(
            "board_operation_rejected",
            error=type(error).__name__,
            message=error.message,
        )
        return error


def _new_id(taken: set[str]) -> str:
    while True:
        candidate = str(uuid.uuid4())
        if candidate not in taken:
            return candidate
