from __future__ import annotations

from typing import Protocol

from src.domain.models import Board


class BoardRepository(Protocol):
    """Persistence port for the board aggregate.

    Implementations always load and save the whole board.
    """

    def load(self) -> Board: ...

    def save(self, board: Board) -> None: ...
