from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from src.api.deps import get_board_service
from src.api.schemas.board import (
    AssignmentCreate,
    AssignmentItem,
    AssignRequest,
    BoardResponse,
    MemberCreate,
    MemberItem,
    SuccessResponse,
)
from src.domain.errors import BoardError
from src.domain.services.board import BoardService

router = APIRouter(prefix="/api", tags=["Board"])


@router.get("/board", response_model=BoardResponse)
def get_board(service: BoardService = Depends(get_board_service)) -> BoardResponse:  # noqa: B008
    """Return every member and assignment on the board."""
    return BoardResponse.from_domain(service.get_board())


@router.post("/members", response_model=MemberItem, status_code=status.HTTP_201_CREATED)
def create_member(
    payload: MemberCreate,
    service: BoardService = Depends(get_board_service),  # noqa: B008
) -> MemberItem:
    try:
        member = service.add_member(payload.name, payload.roles)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return MemberItem.from_domain(member)


@router.post("/assignments", response_model=AssignmentItem, status_code=status.HTTP_201_CREATED)
def create_assignment(
    payload: AssignmentCreate,
    service: BoardService = Depends(get_board_service),  # noqa: B008
) -> AssignmentItem:
    try:
        assignment = service.add_assignment(payload.title, payload.description, payload.category)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return AssignmentItem.from_domain(assignment)


@router.post("/assignments/assign", response_model=SuccessResponse)
def assign_task(
    payload: AssignRequest,
    service: BoardService = Depends(get_board_service),  # noqa: B008
) -> SuccessResponse:
    """Give an assignment to a member holding the assignment's category role."""
    try:
        service.assign_task(payload.assignment_id, payload.member_id)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return SuccessResponse()


@router.patch("/assignments/{assignment_id}/done", response_model=SuccessResponse)
def mark_assignment_done(
    assignment_id: str,
    service: BoardService = Depends(get_board_service),  # noqa: B008
) -> SuccessResponse:
    try:
        service.mark_as_done(assignment_id)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return SuccessResponse()


@router.delete("/assignments/{assignment_id}", response_model=SuccessResponse)
def remove_assignment(
    assignment_id: str,
    service: BoardService = Depends(get_board_service),  # noqa: B008
) -> SuccessResponse:
    """Remove an assignment; only completed ones may leave the board."""
    try:
        service.remove_done_task(assignment_id)
    except BoardError as exc:
        raise _http_error(exc) from exc
    return SuccessResponse()


def _http_error(exc: BoardError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
