"""
Sentences and corpus construction.

Sentence splitting (file -> sentences) happens outside this package; here a
corpus arrives either as raw token sequences or as segmented Exercise
documents and every token is passed through the Lexeme Normalizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from sentence_trainer.lexemes.normalizer import Lexeme, normalize_all, normalize_segment
from sentence_trainer.schemas import Exercise


RawSentence = Union[Sequence[str], Exercise]


@dataclass(frozen=True)
class Sentence:
    """
    An immutable sentence from the corpus.

    `index` is the corpus position and the final tie-break everywhere a
    choice between sentences has to be made.
    """
    index: int
    lexemes: tuple[Lexeme, ...]
    text: str = ""
    english: str = ""

    @property
    def key(self) -> str:
        """Identity used when remembering which sentences a learner has seen."""
        return self.text or " ".join(lexeme.display for lexeme in self.lexemes)

    def __len__(self) -> int:
        return len(self.lexemes)

    def words(self) -> list[Lexeme]:
        """Distinct lexemes in sentence order."""
        seen: set[Lexeme] = set()
        result = []
        for lexeme in self.lexemes:
            if lexeme in seen:
                continue
            seen.add(lexeme)
            result.append(lexeme)
        return result

    def word_keys(self) -> list[str]:
        return [lexeme.key for lexeme in self.words()]


def sentence_from_exercise(index: int, exercise: Exercise) -> Sentence:
    lexemes = tuple(
        normalize_segment(segment.chinese, segment.pinyin)
        for segment in exercise.segments
        if segment.is_word
    )
    return Sentence(
        index=index,
        lexemes=lexemes,
        text=exercise.chinese(),
        english=exercise.english
    )


def sentence_from_tokens(index: int, tokens: Sequence[str], english: str = "") -> Sentence:
    return Sentence(
        index=index,
        lexemes=tuple(normalize_all(tokens)),
        text=" ".join(t.strip() for t in tokens if t.strip()),
        english=english
    )


def build_corpus(raw_sentences: Iterable[RawSentence]) -> list[Sentence]:
    """
    Build an ordered corpus from raw sentences.

    Args:
        raw_sentences: Token sequences (lists of strings) or Exercise documents

    Returns:
        Sentences in input order, indexed from 0
    """
    corpus = []
    for index, raw in enumerate(raw_sentences):
        if isinstance(raw, Exercise):
            corpus.append(sentence_from_exercise(index, raw))
        elif isinstance(raw, str):
            corpus.append(sentence_from_tokens(index, raw.split()))
        else:
            corpus.append(sentence_from_tokens(index, raw))
    return corpus
