"""
Database - word memory persistence

Handles all database operations for word state, review events and seen
sentences. Uses SQLAlchemy ORM (Postgres in production, SQLite works too).

This module handles ONLY database I/O.
Review logic is handled by the scheduler module.
"""

from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from sentence_trainer.config import get_database_url
from sentence_trainer.memory.learner import LearnerModel
from sentence_trainer.memory.models import (
    Base,
    ReviewEvent as ReviewEventModel,
    SeenSentence as SeenSentenceModel,
    WordState as WordStateModel,
)
from sentence_trainer.memory.word_model import WordModel

logger = logging.getLogger(__name__)

# Engines are reused per database URL
_engines: dict[str, Engine] = {}


def get_engine() -> Engine:
    """
    Get SQLAlchemy engine for the configured database.

    Uses connection pooling for server databases.

    Returns:
        SQLAlchemy Engine instance
    """
    db_url = get_database_url()
    engine = _engines.get(db_url)
    if engine is not None:
        return engine

    if db_url.startswith("sqlite"):
        engine = create_engine(db_url, echo=False)
    else:
        engine = create_engine(
            db_url,
            pool_size=5,           # Keep 5 connections open
            max_overflow=10,       # Allow up to 10 extra connections
            pool_pre_ping=True,    # Verify connections before use
            echo=False
        )
    _engines[db_url] = engine
    return engine


def get_session() -> Session:
    """
    Get a SQLAlchemy session for database operations.

    Returns:
        SQLAlchemy Session instance
    """
    SessionLocal = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return SessionLocal()


def init_db():
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times - only creates tables if they don't exist.
    """
    engine = get_engine()

    inspector = inspect(engine)
    existing_tables = set(inspector.get_table_names())
    required = {'word_state', 'review_events', 'seen_sentences'}

    if not required <= existing_tables:
        Base.metadata.create_all(engine)
        logger.info("Created word memory tables")
        return

    word_columns = {col["name"] for col in inspector.get_columns("word_state")}
    if "current_duration_seconds" not in word_columns:
        raise RuntimeError(
            "word_state table is missing current_duration_seconds. "
            "Please reset or migrate the database."
        )


def reset_db():
    """
    DANGEROUS: Delete all data and recreate tables.

    All review history will be lost!
    """
    engine = get_engine()
    Base.metadata.drop_all(engine)
    logger.warning("All word memory tables dropped")

    init_db()


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _to_word_model(db_word: WordStateModel) -> WordModel:
    return WordModel(
        lexeme_key=db_word.lexeme_key,
        current_duration=timedelta(seconds=db_word.current_duration_seconds),
        last_success_timestamp=_as_utc(db_word.last_success_timestamp),
        display=db_word.display,
        review_count=db_word.review_count
    )


def _upsert_word(session: Session, user_id: str, word: WordModel):
    db_word = session.query(WordStateModel).filter(
        WordStateModel.user_id == user_id,
        WordStateModel.lexeme_key == word.lexeme_key
    ).first()

    if db_word is None:
        db_word = WordStateModel(user_id=user_id, lexeme_key=word.lexeme_key)
        session.add(db_word)

    db_word.display = word.display or word.lexeme_key
    db_word.last_success_timestamp = word.last_success_timestamp
    db_word.current_duration_seconds = word.current_duration.total_seconds()
    db_word.review_count = word.review_count


def load_word_model(user_id: str, lexeme_key: str) -> Optional[WordModel]:
    """
    Load word state from database.

    Args:
        user_id: User identifier for scoping review data
        lexeme_key: Canonical lexeme key

    Returns:
        WordModel if found, None if the learner never reviewed the word
    """
    session = get_session()
    try:
        db_word = session.query(WordStateModel).filter(
            WordStateModel.user_id == user_id,
            WordStateModel.lexeme_key == lexeme_key
        ).first()

        if db_word is None:
            return None
        return _to_word_model(db_word)
    finally:
        session.close()


def save_word_model(user_id: str, word: WordModel):
    """
    Save word state to database (insert or update).
    """
    session = get_session()
    try:
        _upsert_word(session, user_id, word)
        session.commit()
    finally:
        session.close()


def batch_save_word_models(user_id: str, words: list[WordModel]):
    """
    Save multiple word states in a single database transaction.
    """
    if not words:
        return

    session = get_session()
    try:
        for word in words:
            _upsert_word(session, user_id, word)
        session.commit()
    finally:
        session.close()


def batch_log_review_events(events: list[dict]):
    """
    Log multiple review events in a single database transaction.

    Args:
        events: Event dicts as returned by scheduler.process_review(), with
            user_id filled in
    """
    if not events:
        return

    session = get_session()
    try:
        for event in events:
            session.add(ReviewEventModel(
                user_id=event['user_id'],
                lexeme_key=event['lexeme_key'],
                display=event.get('display') or event['lexeme_key'],
                timestamp=event['timestamp'],
                outcome=int(event['outcome']),
                duration_before_seconds=event['duration_before_seconds'],
                duration_after_seconds=event['duration_after_seconds'],
                due_before=event.get('due_before'),
                was_overdue=bool(event.get('was_overdue')),
                session_id=event.get('session_id')
            ))
        session.commit()
    finally:
        session.close()


def load_learner(user_id: str, initial_duration: Optional[timedelta] = None) -> LearnerModel:
    """
    Load every stored word state and seen sentence for a learner.

    A learner with no stored data comes back empty, not as an error.
    """
    session = get_session()
    try:
        db_words = session.query(WordStateModel).filter(
            WordStateModel.user_id == user_id
        ).all()
        db_seen = session.query(SeenSentenceModel).filter(
            SeenSentenceModel.user_id == user_id
        ).all()

        return LearnerModel(
            user_id=user_id,
            words={w.lexeme_key: _to_word_model(w) for w in db_words},
            seen_sentences={s.sentence_key: _as_utc(s.seen_at) for s in db_seen},
            initial_duration=initial_duration
        )
    finally:
        session.close()


def save_learner(learner: LearnerModel):
    """
    Save all of a learner's word states and seen sentences.
    """
    session = get_session()
    try:
        for word in learner.words.values():
            _upsert_word(session, learner.user_id, word)

        for sentence_key, seen_at in learner.seen_sentences.items():
            db_seen = session.query(SeenSentenceModel).filter(
                SeenSentenceModel.user_id == learner.user_id,
                SeenSentenceModel.sentence_key == sentence_key
            ).first()
            if db_seen is None:
                session.add(SeenSentenceModel(
                    user_id=learner.user_id,
                    sentence_key=sentence_key,
                    seen_at=seen_at
                ))
            else:
                db_seen.seen_at = seen_at

        session.commit()
    finally:
        session.close()


def get_recent_events(user_id: str, limit: int = 10) -> list[dict]:
    """
    Get recent review events.

    Args:
        user_id: User identifier for scoping review data
        limit: Maximum number of events to return

    Returns:
        List of recent events (newest first)
    """
    session = get_session()
    try:
        events = session.query(ReviewEventModel).filter(
            ReviewEventModel.user_id == user_id
        ).order_by(
            ReviewEventModel.timestamp.desc(),
            ReviewEventModel.id.desc()
        ).limit(limit).all()

        return [
            {
                "id": event.id,
                "user_id": event.user_id,
                "lexeme_key": event.lexeme_key,
                "display": event.display,
                "timestamp": _as_utc(event.timestamp),
                "outcome": event.outcome,
                "duration_before_seconds": event.duration_before_seconds,
                "duration_after_seconds": event.duration_after_seconds,
                "due_before": _as_utc(event.due_before),
                "was_overdue": event.was_overdue,
                "session_id": event.session_id,
            }
            for event in events
        ]
    finally:
        session.close()
