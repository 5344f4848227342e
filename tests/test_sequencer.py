import pytest

from sentence_trainer.corpus import CorpusIndex, build_corpus
from sentence_trainer.lexemes import normalize
from sentence_trainer.sequencing import (
    IntroductionRank,
    KnownWords,
    VocabularySequencer,
    classify_candidate,
    sequence_vocabulary,
)


def keys(lexemes):
    return [lexeme.key for lexeme in lexemes]


@pytest.fixture
def cat_hat_corpus():
    return build_corpus([["the", "cat", "is", "black"], ["a", "hat"]])


class TestWorkedExample:
    def test_plan(self, cat_hat_corpus):
        plan = sequence_vocabulary(cat_hat_corpus, ["cat", "hat", "the", "is"], known=["the", "is"])

        assert keys(plan.targets()) == ["cat", "hat"]
        assert [s.index for s in plan.sentences()] == [0, 1]
        assert [e.rank for e in plan.entries] == [IntroductionRank.LAST_RESORT] * 2
        assert keys(plan.entries[0].needless) == ["black"]
        assert keys(plan.entries[1].needless) == ["a"]
        assert keys(plan.introduced_needlessly) == ["black", "a"]
        assert plan.introduced_too_soon == []
        assert keys(plan.skipped) == ["the", "is"]
        assert plan.unresolved == []

    def test_known_words_grow_with_every_sentence_word(self, cat_hat_corpus):
        known = KnownWords(["the", "is"])

        sequence_vocabulary(cat_hat_corpus, ["cat", "hat", "the", "is"], known=known)

        assert list(known) == ["the", "is", "cat", "black", "a", "hat"]

    def test_deterministic(self, cat_hat_corpus):
        runs = [
            sequence_vocabulary(cat_hat_corpus, ["cat", "hat", "the", "is"], known=["the", "is"])
            for _ in range(3)
        ]
        assert all(run == runs[0] for run in runs)


class TestRanks:
    def test_ideal_when_nothing_else_is_new(self):
        corpus = build_corpus([["the", "cat"]])
        plan = sequence_vocabulary(corpus, ["cat"], known=["the"])

        assert plan.entries[0].rank == IntroductionRank.IDEAL
        assert plan.entries[0].new_words == ()

    def test_acceptable_when_extras_are_later_on_the_list(self):
        corpus = build_corpus([["the", "cat"], ["the", "cat", "black"]])
        plan = sequence_vocabulary(corpus, ["cat", "the"])

        entry = plan.entries[0]
        assert entry.sentence.index == 0
        assert entry.rank == IntroductionRank.ACCEPTABLE
        assert keys(entry.too_soon) == ["the"]
        assert keys(plan.introduced_too_soon) == ["the"]
        assert keys(plan.skipped) == ["the"]

    def test_better_rank_beats_shorter_sentence(self):
        corpus = build_corpus([["cat", "black"], ["cat", "the", "is", "here"]])
        plan = sequence_vocabulary(corpus, ["cat"], known=["the", "is", "here"])

        assert plan.entries[0].sentence.index == 1
        assert plan.entries[0].rank == IntroductionRank.IDEAL

    def test_shorter_sentence_wins_within_a_rank(self):
        corpus = build_corpus([["cat", "the", "is"], ["cat", "the"]])
        plan = sequence_vocabulary(corpus, ["cat"], known=["the", "is"])

        assert plan.entries[0].sentence.index == 1

    def test_corpus_order_breaks_remaining_ties(self):
        corpus = build_corpus([["big", "cat"], ["cat", "big"]])
        plan = sequence_vocabulary(corpus, ["cat"], known=["big"])

        assert plan.entries[0].sentence.index == 0

    def test_classify_candidate_lists_extras_in_sentence_order(self):
        sentence = build_corpus([["the", "cat", "is", "black"]])[0]
        rank, extras = classify_candidate(
            sentence, normalize("cat"), KnownWords(), {"cat": 0, "is": 1, "the": 2}
        )
        assert rank == IntroductionRank.LAST_RESORT
        assert keys(extras) == ["the", "is", "black"]


class TestEdgeCases:
    def test_empty_frequency_list(self, cat_hat_corpus):
        plan = sequence_vocabulary(cat_hat_corpus, [])
        assert len(plan) == 0
        assert plan.skipped == []

    def test_empty_corpus_leaves_everything_unresolved(self):
        plan = sequence_vocabulary([], ["cat", "hat"])
        assert len(plan) == 0
        assert keys(plan.unresolved) == ["cat", "hat"]

    def test_word_missing_from_corpus_is_unresolved(self, cat_hat_corpus):
        plan = sequence_vocabulary(cat_hat_corpus, ["dog", "cat"])
        assert keys(plan.unresolved) == ["dog"]
        assert keys(plan.targets()) == ["cat"]

    def test_word_known_from_earlier_sentence_is_skipped(self, cat_hat_corpus):
        plan = sequence_vocabulary(cat_hat_corpus, ["cat", "black"])
        assert keys(plan.targets()) == ["cat"]
        assert keys(plan.skipped) == ["black"]

    def test_duplicate_list_entries_are_planned_once(self, cat_hat_corpus):
        plan = sequence_vocabulary(cat_hat_corpus, ["hat", "Hat", "hat"])
        assert keys(plan.targets()) == ["hat"]
        assert plan.skipped == []

    def test_sandhi_forms_match_corpus_words(self):
        corpus = build_corpus([["bù", "shì"]])
        plan = sequence_vocabulary(corpus, ["bú", "shì"])
        assert keys(plan.targets()) == ["bù"]
        assert keys(plan.skipped) == ["shì"]

    def test_each_word_introduced_once(self):
        corpus = build_corpus([["a", "b", "c"], ["b", "d"], ["c", "d", "e"]])
        plan = sequence_vocabulary(corpus, ["a", "d", "e"])

        introduced = []
        for entry in plan.entries:
            introduced.append(entry.target.key)
            introduced.extend(keys(entry.new_words))
        assert len(introduced) == len(set(introduced))


class TestVocabularySequencer:
    def test_step_by_step(self, cat_hat_corpus):
        sequencer = VocabularySequencer(CorpusIndex(cat_hat_corpus), ["cat", "hat"])

        entry = sequencer.step(normalize("cat"))

        assert entry.sentence.index == 0
        assert "black" in sequencer.known
        assert "hat" not in sequencer.known
        assert sequencer.step(normalize("black")) is None

    def test_iter_entries_is_lazy(self, cat_hat_corpus):
        sequencer = VocabularySequencer(CorpusIndex(cat_hat_corpus), ["cat", "hat"])
        entries = sequencer.iter_entries()

        first = next(entries)

        assert first.target.key == "cat"
        assert len(sequencer.plan) == 1
        assert "hat" not in sequencer.known

    def test_positions_follow_list_order(self, cat_hat_corpus):
        sequencer = VocabularySequencer(CorpusIndex(cat_hat_corpus), ["Cat", "hat", "cat"])
        assert sequencer.positions == {"cat": 0, "hat": 1}
