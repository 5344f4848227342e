"""
Corpus Index

Maps each lexeme to the sentences that contain it. Built once from a corpus
and read-only afterwards.
"""

from __future__ import annotations

from typing import Iterable

from sentence_trainer.corpus.sentence import Sentence
from sentence_trainer.lexemes.normalizer import Lexeme, lexeme_key


class CorpusIndex:
    """
    Containment lookups over an ordered corpus.
    """

    def __init__(self, sentences: Iterable[Sentence]):
        self._sentences: tuple[Sentence, ...] = tuple(sentences)

        by_word: dict[str, list[Sentence]] = {}
        for sentence in self._sentences:
            for key in sentence.word_keys():
                by_word.setdefault(key, []).append(sentence)
        self._by_word: dict[str, tuple[Sentence, ...]] = {
            key: tuple(found) for key, found in by_word.items()
        }

    @property
    def sentences(self) -> tuple[Sentence, ...]:
        return self._sentences

    def __len__(self) -> int:
        return len(self._sentences)

    def __contains__(self, word: Lexeme | str) -> bool:
        return lexeme_key(word) in self._by_word

    def vocabulary(self) -> set[str]:
        """Keys of every lexeme that appears somewhere in the corpus."""
        return set(self._by_word)

    def containing_sentences(self, word: Lexeme | str) -> tuple[Sentence, ...]:
        """Sentences containing the word, in corpus order (empty if none)."""
        return self._by_word.get(lexeme_key(word), ())

    def words_in(self, sentence: Sentence) -> frozenset[Lexeme]:
        return frozenset(sentence.words())
