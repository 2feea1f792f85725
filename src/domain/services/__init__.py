"""Domain services."""

from src.domain.services.board import BoardService

__all__ = ["BoardService"]
