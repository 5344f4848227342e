"""
Plan export: DataFrame/CSV, JSON-ready dicts and a human readable report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd

from sentence_trainer.sequencing.types import RANK_LABELS, IntroductionRank, SequencePlan


PLAN_COLUMNS = [
    "position",
    "target",
    "rank",
    "sentence_index",
    "sentence",
    "english",
    "new_words",
    "too_soon",
    "needless",
]


def _join(lexemes) -> str:
    return " ".join(lexeme.display for lexeme in lexemes)


def plan_to_records(plan: SequencePlan) -> list[dict]:
    return [
        {
            "position": position,
            "target": entry.target.display,
            "rank": RANK_LABELS[entry.rank],
            "sentence_index": entry.sentence.index,
            "sentence": entry.sentence.key,
            "english": entry.sentence.english,
            "new_words": _join(entry.new_words),
            "too_soon": _join(entry.too_soon),
            "needless": _join(entry.needless),
        }
        for position, entry in enumerate(plan.entries)
    ]


def plan_to_dataframe(plan: SequencePlan) -> pd.DataFrame:
    """One row per plan entry, in plan order."""
    return pd.DataFrame(plan_to_records(plan), columns=PLAN_COLUMNS)


def write_plan_csv(plan: SequencePlan, path: Union[str, Path], sep: str = ",") -> Path:
    path = Path(path)
    plan_to_dataframe(plan).to_csv(path, index=False, sep=sep)
    return path


def plan_to_dict(plan: SequencePlan) -> dict:
    """JSON-ready representation of the whole plan."""
    return {
        "entries": plan_to_records(plan),
        "introduced_too_soon": [w.display for w in plan.introduced_too_soon],
        "introduced_needlessly": [w.display for w in plan.introduced_needlessly],
        "unresolved": [w.display for w in plan.unresolved],
    }


def format_plan_report(plan: SequencePlan) -> str:
    """
    Human readable report.

    Each target is listed with its sentence, marked free when nothing else
    new comes with it and costly otherwise.
    """
    lines = []
    for entry in plan.entries:
        lines.append(entry.target.display)
        sentence = entry.sentence.english or entry.sentence.key
        if entry.rank == IntroductionRank.IDEAL:
            lines.append(f"  Free: {sentence}")
        else:
            lines.append(f"  Costly ({RANK_LABELS[entry.rank]}): {sentence}")
            lines.append(f"    also new: {_join(entry.new_words)}")

    for word in plan.unresolved:
        lines.append(word.display)
        lines.append("  No exercises.")

    lines.append("")
    lines.append(f"Sentences: {len(plan.entries)}")
    lines.append(f"Introduced too soon: {_join(plan.introduced_too_soon) or '-'}")
    lines.append(f"Introduced needlessly: {_join(plan.introduced_needlessly) or '-'}")
    lines.append(f"Unresolved: {_join(plan.unresolved) or '-'}")
    return "\n".join(lines)
