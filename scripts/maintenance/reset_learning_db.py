"""
Drop and recreate the word memory tables.

Every learner's word states, review events and seen sentences are lost.
TEST_MODE=true points this at the test database instead.

Usage:
    python -m scripts.maintenance.reset_learning_db
    python -m scripts.maintenance.reset_learning_db --yes   # no prompt
"""

from __future__ import annotations

import argparse
from typing import Optional

from sentence_trainer import config, memory
from sentence_trainer.memory.models import Base


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Reset the word memory database")
    parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = parser.parse_args(argv)

    tables = ", ".join(table.name for table in Base.metadata.sorted_tables)
    target = "test database" if config.is_test_mode() else "database"
    print(f"Resetting the {target}: {tables}")

    if not args.yes:
        answer = input("Type 'yes' to delete all review history: ")
        if answer.strip().lower() != "yes":
            print("Cancelled, nothing changed.")
            return 1

    memory.reset_db()
    print("✓ Word memory tables recreated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
