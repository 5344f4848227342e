"""
Vocabulary Sequencer

Quick start:
    from sentence_trainer.corpus import build_corpus
    from sentence_trainer.sequencing import sequence_vocabulary

    corpus = build_corpus([["the", "cat", "is", "black"], ["a", "hat"]])
    plan = sequence_vocabulary(corpus, ["cat", "hat", "the", "is"], known=["the", "is"])
"""

from sentence_trainer.sequencing.export import (
    PLAN_COLUMNS,
    format_plan_report,
    plan_to_dataframe,
    plan_to_dict,
    plan_to_records,
    write_plan_csv,
)
from sentence_trainer.sequencing.sequencer import (
    VocabularySequencer,
    classify_candidate,
    sequence_vocabulary,
)
from sentence_trainer.sequencing.types import (
    RANK_LABELS,
    IntroductionRank,
    KnownWords,
    PlanEntry,
    SequencePlan,
)

__all__ = [
    "VocabularySequencer",
    "classify_candidate",
    "sequence_vocabulary",
    "RANK_LABELS",
    "IntroductionRank",
    "KnownWords",
    "PlanEntry",
    "SequencePlan",
    "PLAN_COLUMNS",
    "format_plan_report",
    "plan_to_dataframe",
    "plan_to_dict",
    "plan_to_records",
    "write_plan_csv",
]
