"""
Pydantic models for corpus documents.

A corpus document is one exercise: a Chinese sentence already split into
segments (each with its pinyin) plus an English translation. These models
define the structure of MongoDB documents and of exercise JSON files.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Segment(BaseModel):
    """One segment of a sentence: a word, or punctuation/foreign text."""
    chinese: str = Field(..., description="Simplified characters for this segment")
    pinyin: str = Field(default="", description="Tone-marked pinyin, empty for punctuation")

    @property
    def is_word(self) -> bool:
        """Segments without pinyin are punctuation or foreign text."""
        return bool(self.pinyin.strip())


class Exercise(BaseModel):
    """
    A sentence exercise as stored in the corpus.

    One document per sentence. `position` keeps the corpus order stable
    when exercises are loaded back from MongoDB.
    """
    segments: list[Segment] = Field(default_factory=list)
    english: str = Field(default="", description="English translation")
    position: Optional[int] = Field(default=None, description="Corpus order")
    tags: list[str] = Field(default_factory=list)

    def words(self) -> list[str]:
        """Distinct word segments, in sentence order."""
        seen: set[str] = set()
        words = []
        for segment in self.segments:
            if not segment.is_word or segment.chinese in seen:
                continue
            seen.add(segment.chinese)
            words.append(segment.chinese)
        return words

    def chinese(self) -> str:
        return "".join(s.chinese for s in self.segments)

    def pinyin(self) -> str:
        return " ".join(s.pinyin for s in self.segments if s.pinyin)
