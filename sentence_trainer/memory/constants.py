"""
Memory Model Constants

Review outcomes and the duration-update factors for the word memory model.
The initial (minimum) duration is configured through the environment, see
sentence_trainer.config.get_initial_duration().
"""

from enum import IntEnum


# ---- Review Outcomes ----

class ReviewOutcome(IntEnum):
    """Graded result of one review, as delivered by the exercise layer."""
    WRONG = 1    # Answer was wrong
    HINTED = 2   # Answer needed a hint
    PERFECT = 3  # Answered without help


# ---- Duration Growth ----
# Multipliers applied to the current duration after a PERFECT review

ON_TIME_GROWTH = 1.10   # Reviewed before or at the due date
OVERDUE_GROWTH = 5.00   # Reviewed after the due date and still recalled
