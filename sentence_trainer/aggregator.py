"""
Sentence Aggregator

A sentence's due date is derived, never stored: it is the earliest due
date among its words for the requesting learner. A word the learner has
never reviewed is due now, so any sentence containing it is due now
(a sentence is only as well known as its least known word).

Read-only: nothing here modifies learner state.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from sentence_trainer.corpus.sentence import Sentence
from sentence_trainer.lexemes.normalizer import Lexeme
from sentence_trainer.memory.learner import LearnerModel
from sentence_trainer.memory.word_model import DUE_NOW


def sentence_due_at(sentence: Sentence, learner: LearnerModel) -> datetime:
    """
    Due date of a sentence for one learner.

    A sentence without words (punctuation only) is treated as due now.
    """
    return min(
        (learner.word_model(lexeme).due_at for lexeme in sentence.words()),
        default=DUE_NOW
    )


def is_sentence_due(
    sentence: Sentence,
    learner: LearnerModel,
    at: Optional[datetime] = None
) -> bool:
    if at is None:
        at = datetime.now(timezone.utc)
    return at >= sentence_due_at(sentence, learner)


def due_sentences(
    sentences: Iterable[Sentence],
    learner: LearnerModel,
    at: Optional[datetime] = None
) -> list[Sentence]:
    """
    All sentences due at `at`, most overdue first, ties in corpus order.
    """
    if at is None:
        at = datetime.now(timezone.utc)

    scored = [(sentence_due_at(s, learner), s.index, s) for s in sentences]
    return [s for due, _, s in sorted(scored, key=lambda t: t[:2]) if due <= at]


def next_due_sentence(
    sentences: Iterable[Sentence],
    learner: LearnerModel,
    at: Optional[datetime] = None
) -> Optional[Sentence]:
    """
    The most overdue sentence, or None if nothing is due yet.

    Ties between equally due sentences go to the earlier one in the corpus.
    """
    due = due_sentences(sentences, learner, at)
    return due[0] if due else None


def is_due(
    learner: LearnerModel,
    word: Lexeme | str,
    at: Optional[datetime] = None
) -> bool:
    """Whether one of the learner's words is due for review."""
    return learner.is_due(word, at)
