"""Board persistence adapters."""

from src.infrastructure.storage.base import BoardRepository
from src.infrastructure.storage.json_file import JsonFileBoardRepository, create_empty_board
from src.infrastructure.storage.memory import InMemoryBoardRepository

__all__ = [
    "BoardRepository",
    "InMemoryBoardRepository",
    "JsonFileBoardRepository",
    "create_empty_board",
]
