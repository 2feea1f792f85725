from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


class Role(str, enum.Enum):
    """Skill category held by members and required by assignments."""

    UX = "ux"
    DEV_FRONTEND = "dev-frontend"
    DEV_BACKEND = "dev-backend"

    @classmethod
    def contains(cls, value: str) -> bool:
        return value in {role.value for role in cls}


class AssignmentStatus(str, enum.Enum):
    """Assignment workflow status.

    Transitions only move forward: new -> in-progress -> done.
    """

    NEW = "new"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def assignable_statuses(cls) -> tuple[AssignmentStatus, ...]:
        return (cls.NEW, cls.IN_PROGRESS)


def _utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


@dataclass(slots=True)
class Member:
    """Team participant eligible for assignments matching one of its roles."""

    id: str
    name: str
    roles: list[Role] = field(default_factory=list)

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "roles": [role.value for role in self.roles],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Member:
        return cls(
            id=data["id"],
            name=data["name"],
            roles=[Role(role) for role in data.get("roles", [])],
        )


@dataclass(slots=True)
class Assignment:
    """Unit of work moving through the board lifecycle."""

    id: str
    title: str
    description: str
    category: Role
    status: AssignmentStatus = AssignmentStatus.NEW
    assigned: str | None = None
    timestamp: str = field(default_factory=_utc_now_iso)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "status": self.status.value,
            "assigned": self.assigned,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Assignment:
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            category=Role(data["category"]),
            status=AssignmentStatus(data["status"]),
            assigned=data.get("assigned"),
            timestamp=data["timestamp"],
        )


@dataclass(slots=True)
class Board:
    """Aggregate of all members and assignments; the unit of persistence."""

    members: list[Member] = field(default_factory=list)
    assignments: list[Assignment] = field(default_factory=list)

    def find_member(self, member_id: str) -> Member | None:
        return next((member for member in self.members if member.id == member_id), None)

    def find_assignment(self, assignment_id: str) -> Assignment | None:
        return next(
            (assignment for assignment in self.assignments if assignment.id == assignment_id),
            None,
        )

    def assignment_index(self, assignment_id: str) -> int | None:
        for index, assignment in enumerate(self.assignments):
            if assignment.id == assignment_id:
                return index
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "members": [member.to_dict() for member in self.members],
            "assignments": [assignment.to_dict() for assignment in self.assignments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        return cls(
            members=[Member.from_dict(item) for item in data.get("members", [])],
            assignments=[Assignment.from_dict(item) for item in data.get("assignments", [])],
        )
