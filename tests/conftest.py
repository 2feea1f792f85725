from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from src.api.deps import get_board_service
from src.api.main import app
from src.domain.services.board import BoardService
from src.infrastructure.storage.json_file import JsonFileBoardRepository, create_empty_board
from src.infrastructure.storage.memory import InMemoryBoardRepository


@pytest.fixture()
def board_path(tmp_path: Path) -> Path:
    path = tmp_path / "board.json"
    create_empty_board(path)
    return path


@pytest.fixture()
def board_service(board_path: Path) -> BoardService:
    """Board service persisting to a fresh temporary JSON file."""
    return BoardService(JsonFileBoardRepository(board_path))


@pytest.fixture()
def memory_service() -> BoardService:
    return BoardService(InMemoryBoardRepository())


@pytest.fixture()
def test_client(board_service: BoardService) -> Iterator[TestClient]:
    app.dependency_overrides[get_board_service] = lambda: board_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_board_service, None)


@pytest.fixture()
def lenient_client(board_service: BoardService) -> Iterator[TestClient]:
    """Client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_board_service] = lambda: board_service
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
    app.dependency_overrides.pop(get_board_service, None)


@pytest.fixture()
async def async_client(board_service: BoardService) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing routes through the ASGI transport."""
    app.dependency_overrides[get_board_service] = lambda: board_service
    transport = ASGITransport(app=app)  # type: ignore
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_board_service, None)
