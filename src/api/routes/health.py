from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Depends
from src.api.deps import get_board_service
from src.core.config import get_settings
from src.domain.errors import BoardStorageError
from src.domain.services.board import BoardService

router = APIRouter(tags=["Observability"])
logger = structlog.get_logger()


def check_storage(service: BoardService) -> dict:
    """Check that the board file can be loaded."""
    try:
        board = service.get_board()
    except BoardStorageError as exc:
        return {"status": "error", "message": str(exc)[:100]}
    return {
        "status": "ok",
        "members": len(board.members),
        "assignments": len(board.assignments),
    }


@router.get("/health", summary="Service health probe")
def health_check(service: BoardService = Depends(get_board_service)) -> dict:  # noqa: B008
    """Return basic service and storage status information."""
    settings = get_settings()
    storage_status = check_storage(service)

    payload = {
        "service": settings.app_name,
        "version": settings.version,
        "status": "ok" if storage_status.get("status") == "ok" else "degraded",
        "timestamp": datetime.now(UTC).isoformat(),
        "storage": storage_status,
    }
    # The log timestamp comes from the structlog TimeStamper.
    logger.info("health_probe", **{k: v for k, v in payload.items() if k != "timestamp"})
    return payload
