"""
Typed plan models for the vocabulary sequencer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator

from sentence_trainer.corpus.sentence import Sentence
from sentence_trainer.lexemes.normalizer import Lexeme, lexeme_key


class IntroductionRank(IntEnum):
    """How cleanly a chosen sentence introduces its target word (lower is better)."""
    IDEAL = 0        # Every other word is already known
    ACCEPTABLE = 1   # Other new words are all later in the frequency list
    LAST_RESORT = 2  # At least one other new word is not on the frequency list


RANK_LABELS = {
    IntroductionRank.IDEAL: "free",
    IntroductionRank.ACCEPTABLE: "early",
    IntroductionRank.LAST_RESORT: "off-list",
}


class KnownWords:
    """
    Run-scoped set of lexeme keys considered seen.

    Grows only. Iteration follows insertion order so reports are stable.
    """

    def __init__(self, baseline: Iterable[Lexeme | str] = ()):
        self._keys: dict[str, None] = {}
        self.update(baseline)

    def add(self, word: Lexeme | str) -> None:
        self._keys.setdefault(lexeme_key(word), None)

    def update(self, words: Iterable[Lexeme | str]) -> None:
        for word in words:
            self.add(word)

    def __contains__(self, word: Lexeme | str) -> bool:
        return lexeme_key(word) in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)


@dataclass(frozen=True)
class PlanEntry:
    """
    One step of the plan: the sentence chosen to introduce a target word.
    """
    target: Lexeme
    sentence: Sentence
    rank: IntroductionRank
    new_words: tuple[Lexeme, ...] = ()      # other unknown words the sentence brings in
    too_soon: tuple[Lexeme, ...] = ()       # of those, words due later in the frequency list
    needless: tuple[Lexeme, ...] = ()       # of those, words not on the frequency list


@dataclass
class SequencePlan:
    """
    Ordered exercise plan plus diagnostics.

    The diagnostic lists hold each word once, in the order it was met.
    """
    entries: list[PlanEntry] = field(default_factory=list)
    introduced_too_soon: list[Lexeme] = field(default_factory=list)
    introduced_needlessly: list[Lexeme] = field(default_factory=list)
    unresolved: list[Lexeme] = field(default_factory=list)
    skipped: list[Lexeme] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def sentences(self) -> list[Sentence]:
        return [entry.sentence for entry in self.entries]

    def targets(self) -> list[Lexeme]:
        return [entry.target for entry in self.entries]
