"""
Word Memory Model

Per-learner, per-word review scheduling with a simple percentage rule set:
- PERFECT on time: duration * 1.10
- PERFECT overdue: duration * 5.00
- HINTED: unchanged
- WRONG: duration reset to the initial value

Quick start:
    from sentence_trainer import memory

    learner = memory.LearnerModel(user_id="ana")
    word, event_data = learner.record_review("你好", memory.ReviewOutcome.PERFECT)

    # Persist (optional, caller's responsibility)
    memory.init_db()
    memory.save_learner(learner)
    memory.batch_log_review_events([event_data])
"""

# Core algorithm
from sentence_trainer.memory.scheduler import clamp_duration, process_review

# Constants
from sentence_trainer.memory.constants import (
    ON_TIME_GROWTH,
    OVERDUE_GROWTH,
    ReviewOutcome,
)

# Memory state
from sentence_trainer.memory.word_model import DUE_NOW, WordModel, initialize_new_word
from sentence_trainer.memory.learner import LearnerModel

# Database API
from sentence_trainer.memory.database import (
    batch_log_review_events,
    batch_save_word_models,
    get_recent_events,
    init_db,
    load_learner,
    load_word_model,
    reset_db,
    save_learner,
    save_word_model,
)


__all__ = [
    # Core algorithm
    "process_review",
    "clamp_duration",

    # Enums and parameters
    "ReviewOutcome",
    "ON_TIME_GROWTH",
    "OVERDUE_GROWTH",

    # Memory state
    "DUE_NOW",
    "WordModel",
    "initialize_new_word",
    "LearnerModel",

    # Database operations
    "init_db",
    "reset_db",
    "load_word_model",
    "save_word_model",
    "batch_save_word_models",
    "batch_log_review_events",
    "load_learner",
    "save_learner",
    "get_recent_events",
]
