from __future__ import annotations

from functools import lru_cache

from src.core.config import get_settings
from src.domain.services.board import BoardService
from src.infrastructure.storage.json_file import JsonFileBoardRepository


@lru_cache
def get_board_service() -> BoardService:
    """Provide the process-wide board service backed by the configured JSON file.

    Cached so every request shares one service and therefore one write lock.
    """
    settings = get_settings()
    return BoardService(JsonFileBoardRepository(settings.board_data_path))
