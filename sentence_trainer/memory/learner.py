"""
Learner Model - all word memory state for one learner.

Holds a WordModel per lexeme the learner has reviewed, plus the time each
sentence was last shown. Words the learner has never met are answered with
a fresh, unsaved WordModel, so lookups never fail.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from sentence_trainer import config
from sentence_trainer.lexemes.normalizer import Lexeme, lexeme_key
from sentence_trainer.memory.constants import ReviewOutcome
from sentence_trainer.memory.scheduler import process_review
from sentence_trainer.memory.word_model import WordModel, initialize_new_word


@dataclass
class LearnerModel:
    user_id: str
    words: dict[str, WordModel] = field(default_factory=dict)
    seen_sentences: dict[str, datetime] = field(default_factory=dict)
    initial_duration: Optional[timedelta] = None

    def duration_floor(self) -> timedelta:
        if self.initial_duration is None:
            return config.get_initial_duration()
        return self.initial_duration

    def word_model(self, word: Lexeme | str) -> WordModel:
        """
        Current state for a word.

        Unknown words get a never-reviewed model that is not stored.
        """
        key = lexeme_key(word)
        existing = self.words.get(key)
        if existing is not None:
            return existing
        display = word.display if isinstance(word, Lexeme) else key
        return initialize_new_word(key, display, self.duration_floor())

    def seen(self, word: Lexeme | str) -> bool:
        return lexeme_key(word) in self.words

    def is_due(self, word: Lexeme | str, at: Optional[datetime] = None) -> bool:
        if at is None:
            at = datetime.now(timezone.utc)
        return self.word_model(word).is_due(at)

    def record_review(
        self,
        word: Lexeme | str,
        outcome: ReviewOutcome,
        reviewed_at: Optional[datetime] = None
    ) -> Tuple[WordModel, dict]:
        """
        Apply a review outcome to one of the learner's words.

        A word the learner has never reviewed starts from the default state.

        Returns:
            Tuple of (updated_word, event_data_dict)
        """
        model, event_data = process_review(
            self.word_model(word),
            outcome,
            timestamp=reviewed_at,
            initial_duration=self.duration_floor()
        )
        # Stored only once the review went through
        self.words[lexeme_key(word)] = model
        event_data['user_id'] = self.user_id
        return model, event_data

    def mark_seen(self, sentence, at: Optional[datetime] = None) -> None:
        """Remember when a sentence was last shown."""
        if at is None:
            at = datetime.now(timezone.utc)
        self.seen_sentences[sentence.key] = at

    def last_seen(self, sentence) -> Optional[datetime]:
        return self.seen_sentences.get(sentence.key)
