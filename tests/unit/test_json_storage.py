from __future__ import annotations

import json
from pathlib import Path

import pytest
from src.domain import Assignment, AssignmentStatus, Board, BoardStorageError, Member, Role
from src.infrastructure.storage import (
    InMemoryBoardRepository,
    JsonFileBoardRepository,
    create_empty_board,
)


def _sample_board() -> Board:
    return Board(
        members=[Member(id="m-1", name="Ana", roles=[Role.UX, Role.DEV_FRONTEND])],
        assignments=[
            Assignment(
                id="a-1",
                title="Design",
                description="Login wireframes",
                category=Role.UX,
                status=AssignmentStatus.IN_PROGRESS,
                assigned="m-1",
                timestamp="2024-01-01T00:00:00+00:00",
            )
        ],
    )


def test_save_writes_pretty_printed_document(board_path: Path) -> None:
    JsonFileBoardRepository(board_path).save(_sample_board())

    raw = board_path.read_text(encoding="utf-8")
    assert raw.startswith('{\n  "members": [')
    data = json.loads(raw)
    assert data["members"][0] == {"id": "m-1", "name": "Ana", "roles": ["ux", "dev-frontend"]}
    assert data["assignments"][0]["status"] == "in-progress"
    assert data["assignments"][0]["assigned"] == "m-1"


def test_load_returns_saved_board(board_path: Path) -> None:
    repository = JsonFileBoardRepository(board_path)
    repository.save(_sample_board())

    assert repository.load() == _sample_board()


def test_save_leaves_no_temporary_files(board_path: Path) -> None:
    JsonFileBoardRepository(board_path).save(_sample_board())

    assert [p.name for p in board_path.parent.iterdir()] == [board_path.name]


def test_missing_file_is_not_created(tmp_path: Path) -> None:
    path = tmp_path / "absent.json"

    with pytest.raises(BoardStorageError, match="does not exist"):
        JsonFileBoardRepository(path).load()

    assert not path.exists()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"members": [{"name": "no id"}], "assignments": []}',
        '{"members": [], "assignments": [{"id": "a", "title": "t", "description": "d",'
        ' "category": "qa", "status": "new", "assigned": null, "timestamp": "x"}]}',
    ],
)
def test_corrupt_file_raises_storage_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "board.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(BoardStorageError):
        JsonFileBoardRepository(path).load()


def test_legacy_file_without_assignments_key_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text('{"members": []}', encoding="utf-8")

    assert JsonFileBoardRepository(path).load() == Board()


def test_create_empty_board_keeps_existing_file(board_path: Path) -> None:
    JsonFileBoardRepository(board_path).save(_sample_board())

    assert create_empty_board(board_path) is False
    assert JsonFileBoardRepository(board_path).load() == _sample_board()

    assert create_empty_board(board_path, overwrite=True) is True
    assert JsonFileBoardRepository(board_path).load() == Board()


def test_create_empty_board_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "data" / "board.json"

    assert create_empty_board(path) is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"members": [], "assignments": []}


def test_in_memory_repository_isolates_loaded_copies() -> None:
    repository = InMemoryBoardRepository(_sample_board())

    loaded = repository.load()
    loaded.members.clear()

    assert repository.load() == _sample_board()
