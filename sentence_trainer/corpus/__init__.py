"""Sentence corpus: construction, containment index and storage."""

from sentence_trainer.corpus.index import CorpusIndex
from sentence_trainer.corpus.sentence import (
    RawSentence,
    Sentence,
    build_corpus,
    sentence_from_exercise,
    sentence_from_tokens,
)

__all__ = [
    "CorpusIndex",
    "RawSentence",
    "Sentence",
    "build_corpus",
    "sentence_from_exercise",
    "sentence_from_tokens",
]
