"""
Plan the order in which corpus sentences introduce a vocabulary.

Reads a word list (most frequent first), one or more exercise files and an
optional list of words the learner already knows, then runs the greedy
vocabulary sequencer.

Usage:
    python -m scripts.plan_course words.txt --exercise-files hsk1.json hsk2.json

    # Assume some words are known, write CSV
    python -m scripts.plan_course words.txt --exercise-files hsk1.json \
        --assumed-file known.txt --output-format csv --output plan.csv

    # Re-rank the word list by how often each word occurs in the corpus
    python -m scripts.plan_course words.txt --exercise-files hsk1.json --frequency-sort
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

from sentence_trainer.corpus import CorpusIndex, Sentence, build_corpus
from sentence_trainer.lexemes import Lexeme, unique_lexemes
from sentence_trainer.sequencing import (
    KnownWords,
    SequencePlan,
    format_plan_report,
    plan_to_dataframe,
    plan_to_dict,
    sequence_vocabulary,
)
from scripts._common import load_exercise_files, load_word_file


OUTPUT_FORMATS = ("human", "csv", "json")


def sort_by_corpus_frequency(words: list[Lexeme], corpus: list[Sentence]) -> list[Lexeme]:
    """
    Most frequent first, counting one occurrence per sentence.

    Ties keep word-list order.
    """
    counts: Counter[str] = Counter()
    for sentence in corpus:
        counts.update(sentence.word_keys())
    order = {lexeme.key: i for i, lexeme in enumerate(words)}
    return sorted(words, key=lambda w: (-counts[w.key], order[w.key]))


def plan_course(
    word_file: Path,
    exercise_files: list[Path],
    assumed_file: Optional[Path] = None,
    frequency_sort: bool = False
) -> SequencePlan:
    corpus = build_corpus(load_exercise_files(exercise_files))
    words = unique_lexemes(load_word_file(word_file))
    if frequency_sort:
        words = sort_by_corpus_frequency(words, corpus)

    assumed = unique_lexemes(load_word_file(assumed_file)) if assumed_file else []

    return sequence_vocabulary(CorpusIndex(corpus), words, KnownWords(assumed))


def render(plan: SequencePlan, output_format: str) -> str:
    if output_format == "csv":
        return plan_to_dataframe(plan).to_csv(index=False)
    if output_format == "json":
        return json.dumps(plan_to_dict(plan), ensure_ascii=False, indent=2)
    return format_plan_report(plan)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Plan a sentence course for a word list")
    parser.add_argument("word_file", type=Path, help="Word list, most frequent first")
    parser.add_argument("--exercise-files", type=Path, nargs="+", required=True,
                        help="JSON files with segmented exercises")
    parser.add_argument("--assumed-file", type=Path, default=None,
                        help="Words the learner already knows")
    parser.add_argument("--output-format", choices=OUTPUT_FORMATS, default="human")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write to this file instead of stdout")
    parser.add_argument("--frequency-sort", action="store_true",
                        help="Re-rank the word list by corpus frequency")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    plan = plan_course(
        args.word_file,
        args.exercise_files,
        assumed_file=args.assumed_file,
        frequency_sort=args.frequency_sort
    )
    text = render(plan, args.output_format)

    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"✓ Wrote {len(plan)} planned sentences to {args.output}")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
