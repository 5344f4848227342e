"""
Show a learner's progress on a word list and what to practise next.

Usage:
    python -m scripts.learner_status --word-file words.txt --exercise-files hsk1.json
    python -m scripts.learner_status --word-file words.txt --exercise-files hsk1.json --user-id ana
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sentence_trainer import config, memory
from sentence_trainer.aggregator import next_due_sentence
from sentence_trainer.corpus import build_corpus
from sentence_trainer.lexemes import unique_lexemes
from sentence_trainer.session_builder import next_exercise, next_word, word_list_status
from scripts._common import load_exercise_files, load_word_file


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Show learner progress")
    parser.add_argument("--word-file", type=Path, required=True)
    parser.add_argument("--exercise-files", type=Path, nargs="+", required=True)
    parser.add_argument("--user-id", default=None, help="Learner (default: DEFAULT_USER_ID)")
    args = parser.parse_args(argv)

    user_id = args.user_id or config.get_default_user_id()
    now = datetime.now(timezone.utc)

    memory.init_db()
    learner = memory.load_learner(user_id)
    sentences = build_corpus(load_exercise_files(args.exercise_files))
    words = unique_lexemes(load_word_file(args.word_file))

    status = word_list_status(learner, sentences, words, now)
    print("=" * 60)
    print(f"Learner: {user_id}")
    print("=" * 60)
    print(f"Words in list:      {status.total_words}")
    print(f"Known words:        {status.known_words}")
    print(f"To review:          {status.words_to_review}")
    print(f"Sentences seen:     {status.seen_sentences}/{status.unlocked_sentences}")
    print()

    target = next_word(learner, words, now)
    if target is None:
        print("Word list is empty.")
        return

    print(f"Target word: {target}")
    exercise = next_exercise(learner, sentences, words, target, now)
    if exercise is None:
        print("  No sentence contains the target word.")
    else:
        print(f"  Next exercise: {exercise.key}")
        if exercise.english:
            print(f"  English:       {exercise.english}")

    due = next_due_sentence(sentences, learner, now)
    print(f"Most overdue sentence: {due.key if due is not None else '(none)'}")


if __name__ == "__main__":
    main()
