"""
Vocabulary Sequencer - greedy course planning

Walks a frequency-ranked word list and, for each word not yet known,
picks the corpus sentence that introduces it with the least collateral:
1. IDEAL: no other unknown word in the sentence
2. ACCEPTABLE: other unknown words are all needed later anyway
3. LAST_RESORT: some other unknown word is off the frequency list

Ties go to the shorter sentence, then to the earlier one in the corpus.
Every word of a chosen sentence becomes known.

The result depends only on (corpus, frequency list, baseline), so identical
inputs always give the identical plan. Each target word is handled in one
step; a caller may stop between steps without leaving the known set in a
half-updated state.
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional, Tuple

from sentence_trainer.corpus.index import CorpusIndex
from sentence_trainer.corpus.sentence import Sentence
from sentence_trainer.lexemes.normalizer import Lexeme, normalize
from sentence_trainer.sequencing.types import (
    IntroductionRank,
    KnownWords,
    PlanEntry,
    SequencePlan,
)

logger = logging.getLogger(__name__)


def _as_lexemes(words: Iterable[Lexeme | str]) -> list[Lexeme]:
    """Normalize and de-duplicate, keeping first occurrences."""
    seen: set[Lexeme] = set()
    result = []
    for word in words:
        lexeme = word if isinstance(word, Lexeme) else normalize(word)
        if not lexeme.key or lexeme in seen:
            continue
        seen.add(lexeme)
        result.append(lexeme)
    return result


def classify_candidate(
    sentence: Sentence,
    target: Lexeme,
    known: KnownWords,
    positions: dict[str, int]
) -> Tuple[IntroductionRank, list[Lexeme]]:
    """
    Rank a candidate sentence for introducing `target`.

    Args:
        sentence: Candidate containing the target
        target: Word being introduced
        known: Words already seen in this run
        positions: Frequency-list position by lexeme key

    Returns:
        Tuple of (rank, extra new words in sentence order)
    """
    extras = [
        lexeme for lexeme in sentence.words()
        if lexeme != target and lexeme not in known
    ]
    if not extras:
        return IntroductionRank.IDEAL, extras
    if any(lexeme.key not in positions for lexeme in extras):
        return IntroductionRank.LAST_RESORT, extras
    return IntroductionRank.ACCEPTABLE, extras


class VocabularySequencer:
    """
    Single greedy pass over a frequency list.

    Usage:
        sequencer = VocabularySequencer(index, frequency_list, KnownWords(baseline))
        plan = sequencer.run()
    """

    def __init__(
        self,
        index: CorpusIndex,
        frequency_list: Iterable[Lexeme | str],
        known: Optional[KnownWords] = None
    ):
        self.index = index
        self.frequency_list = _as_lexemes(frequency_list)
        self.known = known if known is not None else KnownWords()
        self.positions = {lexeme.key: i for i, lexeme in enumerate(self.frequency_list)}
        self.plan = SequencePlan()

    def best_candidate(
        self,
        target: Lexeme
    ) -> Optional[Tuple[Sentence, IntroductionRank, list[Lexeme]]]:
        """Best sentence for the target, or None if no sentence contains it."""
        best = None
        best_key = None
        for sentence in self.index.containing_sentences(target):
            rank, extras = classify_candidate(sentence, target, self.known, self.positions)
            sort_key = (rank, len(sentence), sentence.index)
            if best_key is None or sort_key < best_key:
                best, best_key = (sentence, rank, extras), sort_key
        return best

    def step(self, target: Lexeme) -> Optional[PlanEntry]:
        """
        Handle one target word and record the result in self.plan.

        Returns:
            The new PlanEntry, or None if the word was skipped or unresolved
        """
        if target in self.known:
            self.plan.skipped.append(target)
            return None

        candidate = self.best_candidate(target)
        if candidate is None:
            logger.info("No sentence contains %s; leaving it unresolved", target.display)
            self.plan.unresolved.append(target)
            return None

        sentence, rank, extras = candidate
        too_soon = tuple(w for w in extras if w.key in self.positions)
        needless = tuple(w for w in extras if w.key not in self.positions)

        entry = PlanEntry(
            target=target,
            sentence=sentence,
            rank=rank,
            new_words=tuple(extras),
            too_soon=too_soon,
            needless=needless
        )

        self.plan.entries.append(entry)
        self.plan.introduced_too_soon.extend(too_soon)
        self.plan.introduced_needlessly.extend(needless)
        self.known.update(sentence.words())

        if rank == IntroductionRank.LAST_RESORT:
            logger.debug(
                "%s introduced with off-list words: %s",
                target.display, ", ".join(w.display for w in needless)
            )
        return entry

    def iter_entries(self) -> Iterator[PlanEntry]:
        """Run the pass lazily, yielding each entry as it is chosen."""
        for target in self.frequency_list:
            entry = self.step(target)
            if entry is not None:
                yield entry

    def run(self) -> SequencePlan:
        for _ in self.iter_entries():
            pass
        logger.info(
            "Planned %d sentences (%d unresolved, %d skipped)",
            len(self.plan.entries), len(self.plan.unresolved), len(self.plan.skipped)
        )
        return self.plan


def sequence_vocabulary(
    corpus: CorpusIndex | Iterable[Sentence],
    frequency_list: Iterable[Lexeme | str],
    known: Optional[KnownWords | Iterable[Lexeme | str]] = None
) -> SequencePlan:
    """
    Plan the order in which sentences introduce a vocabulary.

    Args:
        corpus: CorpusIndex, or sentences to index
        frequency_list: Words from most to least frequent
        known: Caller-owned KnownWords (grown in place), or baseline words

    Returns:
        SequencePlan (empty for an empty corpus or frequency list)
    """
    index = corpus if isinstance(corpus, CorpusIndex) else CorpusIndex(corpus)
    if not isinstance(known, KnownWords):
        known = KnownWords(known or ())
    return VocabularySequencer(index, frequency_list, known).run()
