"""
Import segmented exercises from a JSON file into the MongoDB corpus.

Exercises without a position are appended in file order.

Usage:
    python -m scripts.data.import_exercises data/hsk1.json [--dry-run]
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from sentence_trainer.corpus import corpus_repo
from scripts._common import load_exercise_files


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Import exercises to MongoDB")
    parser.add_argument("exercise_file", type=Path)
    parser.add_argument("--dry-run", action="store_true",
                        help="Validate the file without writing to MongoDB")
    args = parser.parse_args(argv)

    exercises = load_exercise_files([args.exercise_file])
    print(f"Loaded {len(exercises)} exercises from {args.exercise_file}")

    if args.dry_run:
        words = {w for e in exercises for w in e.words()}
        print(f"Distinct words: {len(words)}")
        print("Dry run, nothing written.")
        return

    written = corpus_repo.upsert_exercises(exercises)
    print(f"✓ Upserted {written} exercises into "
          f"{corpus_repo.DB_NAME}.{corpus_repo.COLLECTION_NAME}")


if __name__ == "__main__":
    main()
