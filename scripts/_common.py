"""
Shared file loading for the command-line scripts.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from sentence_trainer.schemas import Exercise


def load_exercise_files(paths: Iterable[Path]) -> list[Exercise]:
    """
    Load exercises from JSON files, each holding a list of exercise objects.

    Files are concatenated in the order given.
    """
    exercises: list[Exercise] = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Exercise file not found: {path}")
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"{path} must contain a JSON list of exercises")
        exercises.extend(Exercise.model_validate(item) for item in data)
    return exercises


def load_word_file(path: Path) -> list[str]:
    """
    Load a word list: whitespace separated words, '#' starts a comment line.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word file not found: {path}")

    words = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        words.extend(line.split())
    return words
