from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError
from src.domain.models import Assignment, AssignmentStatus, Board, Member, Role


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("required", message)
    return value.strip()


class MemberCreate(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: str = ""
    roles: list[Role] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_required(cls, value: Any) -> str:
        return _require_text(value, "Member name is required")

    @field_validator("roles", mode="before")
    @classmethod
    def _roles_valid(cls, value: Any) -> list[str]:
        if not isinstance(value, list) or not value:
            raise PydanticCustomError("roles_required", "At least one role is required")
        for role in value:
            if not isinstance(role, str) or not Role.contains(role):
                raise PydanticCustomError("invalid_role", "Invalid role")
        return value


class AssignmentCreate(BaseModel):
    model_config = ConfigDict(validate_default=True)

    title: str = ""
    description: str = ""
    category: Role | None = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_required(cls, value: Any) -> str:
        return _require_text(value, "Assignment title is required")

    @field_validator("description", mode="before")
    @classmethod
    def _description_required(cls, value: Any) -> str:
        return _require_text(value, "Description is required")

    @field_validator("category", mode="before")
    @classmethod
    def _category_valid(cls, value: Any) -> str:
        if not isinstance(value, str) or not Role.contains(value):
            raise PydanticCustomError("invalid_category", "Invalid category")
        return value


class AssignRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_default=True)

    assignment_id: str = Field(default="", alias="assignmentId")
    member_id: str = Field(default="", alias="memberId")

    @field_validator("assignment_id", mode="before")
    @classmethod
    def _assignment_id_required(cls, value: Any) -> str:
        return _require_text(value, "Assignment ID is required")

    @field_validator("member_id", mode="before")
    @classmethod
    def _member_id_required(cls, value: Any) -> str:
        return _require_text(value, "Member ID is required")


class MemberItem(BaseModel):
    id: str
    name: str
    roles: list[Role]

    @classmethod
    def from_domain(cls, member: Member) -> MemberItem:
        return cls(id=member.id, name=member.name, roles=list(member.roles))


class AssignmentItem(BaseModel):
    id: str
    title: str
    description: str
    category: Role
    status: AssignmentStatus
    assigned: str | None = None
    timestamp: str

    @classmethod
    def from_domain(cls, assignment: Assignment) -> AssignmentItem:
        return cls(**assignment.to_dict())


class BoardResponse(BaseModel):
    members: list[MemberItem]
    assignments: list[AssignmentItem]

    @classmethod
    def from_domain(cls, board: Board) -> BoardResponse:
        return cls(
            members=[MemberItem.from_domain(member) for member in board.members],
            assignments=[AssignmentItem.from_domain(item) for item in board.assignments],
        )


class SuccessResponse(BaseModel):
    success: bool = True
