"""
Session Builder - live exercise selection

Picks what a learner practises next during a review session:
1. next_word(): the target word (overdue first, then new, then upcoming)
2. next_exercise(): the best sentence for that target word
3. word_list_status(): progress counters for a word list

Everything here reads learner state; recording outcomes goes through
LearnerModel.record_review().
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence

from sentence_trainer.corpus.sentence import Sentence
from sentence_trainer.lexemes.normalizer import Lexeme, lexeme_key
from sentence_trainer.memory.learner import LearnerModel
from sentence_trainer.memory.word_model import DUE_NOW


@dataclass(frozen=True)
class ExerciseScore:
    """
    Cost of showing a sentence now. Lower is better, compared field by field.
    """
    words_not_in_list: int      # words outside the word list (not currently learnt)
    words_in_list: int          # list words that are not currently learnt
    words_not_seen: int         # words the learner has never reviewed
    last_seen: Optional[datetime]  # when the sentence was last shown (never first)
    future_words_count: int     # learnt words, i.e. scheduled in the future

    def sort_key(self) -> tuple:
        return (
            self.words_not_in_list,
            self.words_in_list,
            self.words_not_seen,
            self.last_seen is not None,
            self.last_seen or DUE_NOW,
            self.future_words_count,
        )


@dataclass(frozen=True)
class WordListStatus:
    total_words: int        # unique words in the word list
    known_words: int        # list words scheduled in the future
    words_to_review: int    # list words scheduled in the past
    seen_sentences: int     # unlocked sentences the learner has already done
    unlocked_sentences: int  # sentences with a list word and no unseen words


def _now(at: Optional[datetime]) -> datetime:
    return at if at is not None else datetime.now(timezone.utc)


def next_word(
    learner: LearnerModel,
    word_list: Sequence[Lexeme | str],
    at: Optional[datetime] = None
) -> Optional[str]:
    """
    Pick the target word for the next exercise.

    Priority order:
    1. Seen words that are due, the one that became due most recently first
    2. Unseen words, in word-list order
    3. Seen words not yet due, the one due soonest first

    Returns:
        Lexeme key of the chosen word, or None for an empty word list
    """
    at = _now(at)
    best_key = None
    best_word = None
    for idx, word in enumerate(word_list):
        key = lexeme_key(word)
        if learner.seen(key):
            diff = learner.word_model(key).due_at - at
            if diff <= timedelta(0):
                score = (0, -diff, idx)
            else:
                score = (2, diff, idx)
        else:
            score = (1, timedelta(0), idx)
        if best_key is None or score < best_key:
            best_key, best_word = score, key
    return best_word


def score_exercise(
    learner: LearnerModel,
    sentence: Sentence,
    word_list: Iterable[Lexeme | str],
    at: Optional[datetime] = None
) -> ExerciseScore:
    """
    Score a sentence for the learner at time `at`.

    Words the learner has learnt (scheduled in the future) are free; every
    other word is counted as either inside or outside the word list.
    """
    at = _now(at)
    list_keys = {lexeme_key(w) for w in word_list}
    words = sentence.word_keys()

    future = {
        w for w in words
        if learner.seen(w) and learner.word_model(w).due_at > at
    }
    pending = [w for w in words if w not in future]

    return ExerciseScore(
        words_not_in_list=sum(1 for w in pending if w not in list_keys),
        words_in_list=sum(1 for w in pending if w in list_keys),
        words_not_seen=sum(1 for w in words if not learner.seen(w)),
        last_seen=learner.last_seen(sentence),
        future_words_count=len(future)
    )


def next_exercise(
    learner: LearnerModel,
    sentences: Iterable[Sentence],
    word_list: Sequence[Lexeme | str],
    target_word: Lexeme | str,
    at: Optional[datetime] = None
) -> Optional[Sentence]:
    """
    Pick the lowest-cost sentence containing the target word.

    Returns:
        The chosen Sentence, or None if no sentence contains the target
    """
    at = _now(at)
    target = lexeme_key(target_word)
    best = None
    best_key = None
    for sentence in sentences:
        if target not in sentence.word_keys():
            continue
        sort_key = (score_exercise(learner, sentence, word_list, at).sort_key(), sentence.index)
        if best_key is None or sort_key < best_key:
            best, best_key = sentence, sort_key
    return best


def word_list_status(
    learner: LearnerModel,
    sentences: Iterable[Sentence],
    word_list: Sequence[Lexeme | str],
    at: Optional[datetime] = None
) -> WordListStatus:
    """
    Progress counters for a word list.
    """
    at = _now(at)
    list_keys = {lexeme_key(w) for w in word_list}

    known_words = 0
    words_to_review = 0
    for key in list_keys:
        if not learner.seen(key):
            continue
        if learner.word_model(key).due_at > at:
            known_words += 1
        else:
            words_to_review += 1

    seen_sentences: set[str] = set()
    unlocked_sentences: set[str] = set()
    for sentence in sentences:
        words = sentence.word_keys()
        if not any(w in list_keys for w in words):
            continue
        if not all(learner.seen(w) for w in words):
            continue
        unlocked_sentences.add(sentence.key)
        if learner.last_seen(sentence) is not None:
            seen_sentences.add(sentence.key)

    return WordListStatus(
        total_words=len(list_keys),
        known_words=known_words,
        words_to_review=words_to_review,
        seen_sentences=len(seen_sentences),
        unlocked_sentences=len(unlocked_sentences)
    )
