from __future__ import annotations

from typing import Any

from src.domain.models import Board


class InMemoryBoardRepository:
    """Board repository that keeps a serialized copy in process memory."""

    def __init__(self, board: Board | None = None) -> None:
        self._data: dict[str, Any] = (board or Board()).to_dict()

    def load(self) -> Board:
        return Board.from_dict(self._data)

    def save(self, board: Board) -> None:
        self._data = board.to_dict()
