"""
SQLAlchemy ORM Models for word memory persistence.

Defines WordState, ReviewEvent and SeenSentence tables.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class WordState(Base):
    """
    Persistent memory state for a single (learner, lexeme) pair.
    """
    __tablename__ = 'word_state'

    # Primary key: composite of user_id and lexeme_key
    user_id = Column(String(255), primary_key=True, nullable=False)
    lexeme_key = Column(String(255), primary_key=True, nullable=False)

    # Metadata for readability
    display = Column(String(255), nullable=False)

    # Memory state
    last_success_timestamp = Column(DateTime(timezone=True), nullable=True)
    current_duration_seconds = Column(Float, nullable=False)
    review_count = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<WordState({self.user_id}, {self.lexeme_key})>"


class ReviewEvent(Base):
    """
    Log entry for a single review of a word.
    """
    __tablename__ = 'review_events'

    id = Column(Integer, primary_key=True, autoincrement=True)

    user_id = Column(String(255), nullable=False)
    lexeme_key = Column(String(255), nullable=False)
    display = Column(String(255), nullable=False)

    timestamp = Column(DateTime(timezone=True), nullable=False)
    outcome = Column(Integer, nullable=False)  # 1=WRONG, 2=HINTED, 3=PERFECT

    # State before/after review
    duration_before_seconds = Column(Float, nullable=False)
    duration_after_seconds = Column(Float, nullable=False)
    due_before = Column(DateTime(timezone=True), nullable=True)  # NULL for new words
    was_overdue = Column(Boolean, nullable=False, default=False)

    # Session context (optional, for analytics)
    session_id = Column(String(255), nullable=True)

    def __repr__(self):
        return f"<ReviewEvent(id={self.id}, {self.lexeme_key}, outcome={self.outcome})>"


class SeenSentence(Base):
    """
    When a learner last completed a sentence.
    """
    __tablename__ = 'seen_sentences'

    user_id = Column(String(255), primary_key=True, nullable=False)
    sentence_key = Column(String(512), primary_key=True, nullable=False)
    seen_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<SeenSentence({self.user_id}, {self.sentence_key})>"
