"""
Word Model - per-learner memory state for one Lexeme.

Key concepts:
- current_duration: interval after which the word becomes due
- last_success_timestamp: last PERFECT or WRONG review (None if never reviewed)
- due_at: last_success_timestamp + current_duration, or DUE_NOW for new words
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from sentence_trainer import config


# Due date of a word that has never been reviewed: earlier than any real time
DUE_NOW = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class WordModel:
    """
    Memory state for a single (learner, lexeme) pair.

    Mutated only by scheduler.process_review().
    """
    lexeme_key: str
    current_duration: timedelta
    last_success_timestamp: Optional[datetime] = None
    display: str = ""
    review_count: int = 0

    @property
    def is_new(self) -> bool:
        return self.last_success_timestamp is None

    @property
    def due_at(self) -> datetime:
        if self.last_success_timestamp is None:
            return DUE_NOW
        return self.last_success_timestamp + self.current_duration

    def is_due(self, at: datetime) -> bool:
        """A word is due once the current time reaches its due date."""
        return at >= self.due_at


def initialize_new_word(
    lexeme_key: str,
    display: str = "",
    initial_duration: Optional[timedelta] = None
) -> WordModel:
    """
    Initialize state for a word the learner has never reviewed.

    Args:
        lexeme_key: Canonical lexeme key
        display: Display form of the word
        initial_duration: Starting duration (default: configured floor)

    Returns:
        New WordModel that is due immediately
    """
    if initial_duration is None:
        initial_duration = config.get_initial_duration()

    return WordModel(
        lexeme_key=lexeme_key,
        current_duration=initial_duration,
        last_success_timestamp=None,
        display=display or lexeme_key,
        review_count=0
    )
