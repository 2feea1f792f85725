"""
Create an empty board file at the configured BOARD_DATA_PATH.

The service never creates its data file on its own, so run this once before
the first start (or pass --force to reset an existing board).

Usage:
    python scripts/init_board.py [--path data/board.json] [--force]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to Python path so the src package resolves from any cwd
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.config import get_settings
from src.infrastructure.storage.json_file import create_empty_board


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Initialise an empty scrum board file.")
    parser.add_argument("--path", default=settings.board_data_path, help="Board JSON file")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing board")
    args = parser.parse_args(argv)

    created = create_empty_board(args.path, overwrite=args.force)
    if created:
        print(f"Empty board written to {args.path}")
    else:
        print(f"{args.path} already exists; use --force to reset it")
    return 0


if __name__ == "__main__":
    sys.exit(main())
