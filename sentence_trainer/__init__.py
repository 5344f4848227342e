"""
Sentence trainer: spaced repetition and course sequencing for learning a
language through full sentences.

Subpackages:
- lexemes: canonical word identity (tone sandhi aware)
- memory: per-learner word memory model and its persistence
- corpus: sentences and the word -> sentence index
- sequencing: greedy vocabulary sequencer and plan export
"""

__version__ = "0.1.0"
