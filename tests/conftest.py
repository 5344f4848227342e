import datetime as dt

import pytest

from sentence_trainer.corpus import build_corpus
from sentence_trainer.memory.learner import LearnerModel
from sentence_trainer.schemas import Exercise


UTC = dt.timezone.utc


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # Keep a developer's .env from leaking into tests
    for name in ("DATABASE_URL", "MONGO_URI", "TEST_MODE", "DEFAULT_USER_ID",
                 "INITIAL_DURATION_SECONDS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def now():
    return dt.datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def initial_duration():
    return dt.timedelta(seconds=5)


@pytest.fixture
def learner(initial_duration):
    return LearnerModel(user_id="test-user", initial_duration=initial_duration)


def _make_exercise(*pairs, english=""):
    """Build an Exercise from (chinese, pinyin) pairs."""
    return Exercise.model_validate({
        "segments": [{"chinese": c, "pinyin": p} for c, p in pairs],
        "english": english,
    })


@pytest.fixture
def chinese_corpus():
    return build_corpus([
        _make_exercise(("你好", "nǐ hǎo"), ("。", ""), english="Hello."),
        _make_exercise(("我", "wǒ"), ("是", "shì"), ("学生", "xuésheng"), ("。", ""),
                       english="I am a student."),
        _make_exercise(("你", "nǐ"), ("是", "shì"), ("学生", "xuésheng"), ("吗", "ma"),
                       ("？", ""), english="Are you a student?"),
        _make_exercise(("我", "wǒ"), ("不", "bú"), ("是", "shì"), ("老师", "lǎoshī"),
                       ("。", ""), english="I am not a teacher."),
    ])


@pytest.fixture
def make_exercise():
    return _make_exercise
