"""
Scheduler - Word Memory Model transitions

Pure duration/due-date updates (no database calls).

Rules per outcome:
- PERFECT on time: duration grows by 10%
- PERFECT overdue: duration grows to 500% of its prior value
- HINTED: nothing changes, the word keeps its due date
- WRONG: duration resets to the initial value, the clock restarts

The duration never drops below the configured initial value.
"""

from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from sentence_trainer import config
from sentence_trainer.memory.constants import (
    ON_TIME_GROWTH,
    OVERDUE_GROWTH,
    ReviewOutcome,
)
from sentence_trainer.memory.word_model import WordModel

logger = logging.getLogger(__name__)


def clamp_duration(duration: timedelta, floor: timedelta) -> timedelta:
    return duration if duration >= floor else floor


def process_review(
    word: WordModel,
    outcome: ReviewOutcome,
    timestamp: Optional[datetime] = None,
    initial_duration: Optional[timedelta] = None
) -> Tuple[WordModel, dict]:
    """
    Apply one review outcome and return updated word state + event data.

    Caller is responsible for loading the word before and saving it after.

    Args:
        word: WordModel to update in place (may be new)
        outcome: Graded outcome (WRONG, HINTED, PERFECT)
        timestamp: Review timestamp (defaults to now)
        initial_duration: Duration floor (defaults to configured value)

    Returns:
        Tuple of (updated_word, event_data_dict)
        event_data_dict is ready to pass to database.batch_log_review_events()
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)
    if initial_duration is None:
        initial_duration = config.get_initial_duration()

    outcome = ReviewOutcome(outcome)
    was_new = word.is_new
    due_before = None if was_new else word.due_at
    duration_before = word.current_duration
    was_overdue = due_before is not None and timestamp > due_before

    if outcome == ReviewOutcome.PERFECT:
        growth = OVERDUE_GROWTH if was_overdue else ON_TIME_GROWTH
        word.current_duration = clamp_duration(word.current_duration * growth, initial_duration)
        word.last_success_timestamp = timestamp
    elif outcome == ReviewOutcome.WRONG:
        word.current_duration = initial_duration
        word.last_success_timestamp = timestamp
    else:
        # HINTED: not a success, due date is left where it was
        word.current_duration = clamp_duration(word.current_duration, initial_duration)

    word.review_count += 1

    logger.debug(
        "Review %s for %s: duration %s -> %s",
        outcome.name, word.lexeme_key, duration_before, word.current_duration
    )

    event_data = {
        'lexeme_key': word.lexeme_key,
        'display': word.display,
        'timestamp': timestamp,
        'outcome': outcome,
        'duration_before_seconds': duration_before.total_seconds(),
        'duration_after_seconds': word.current_duration.total_seconds(),
        'due_before': due_before,
        'was_overdue': was_overdue,
        'was_new': was_new,
        'user_id': None,  # Will be set by caller if needed
        'session_id': None,  # Will be set by caller if needed
    }

    return word, event_data
