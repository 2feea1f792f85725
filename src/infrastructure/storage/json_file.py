from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import structlog
from src.domain.errors import BoardStorageError
from src.domain.models import Board

logger = structlog.get_logger()


class JsonFileBoardRepository:
    """Persist the board as a single pretty-printed JSON document.

    The file must already exist; loading never creates it. Every save
    rewrites the whole document through a temporary file in the same
    directory, so readers never observe a half-written board.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Board:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise BoardStorageError(f"Board file {self.path} does not exist") from exc
        except OSError as exc:
            raise BoardStorageError(f"Board file {self.path} could not be read") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise BoardStorageError(f"Board file {self.path} is not valid JSON") from exc

        if not isinstance(data, dict):
            raise BoardStorageError(f"Board file {self.path} must contain a JSON object")

        try:
            return Board.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise BoardStorageError(f"Board file {self.path} has an unexpected shape") from exc

    def save(self, board: Board) -> None:
        payload = json.dumps(board.to_dict(), indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.write("\n")
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise BoardStorageError(f"Board file {self.path} could not be written") from exc

        logger.debug(
            "board_saved",
            path=str(self.path),
            members=len(board.members),
            assignments=len(board.assignments),
        )


def create_empty_board(path: str | Path, *, overwrite: bool = False) -> bool:
    """Write an empty board file. Returns False when the file exists and is kept."""
    target = Path(path)
    if target.exists() and not overwrite:
        return False

    target.parent.mkdir(parents=True, exist_ok=True)
    JsonFileBoardRepository(target).save(Board())
    return True
