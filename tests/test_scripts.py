import json

import pytest

from scripts import learner_status, plan_course
from scripts._common import load_exercise_files, load_word_file
from scripts.data import import_exercises
from scripts.maintenance import reset_learning_db
from sentence_trainer import memory


EXERCISES = [
    {"segments": [{"chinese": "你好", "pinyin": "nǐ hǎo"}, {"chinese": "。"}],
     "english": "Hello."},
    {"segments": [{"chinese": "我", "pinyin": "wǒ"}, {"chinese": "是", "pinyin": "shì"},
                  {"chinese": "学生", "pinyin": "xuésheng"}],
     "english": "I am a student."},
    {"segments": [{"chinese": "你", "pinyin": "nǐ"}, {"chinese": "是", "pinyin": "shì"},
                  {"chinese": "学生", "pinyin": "xuésheng"}, {"chinese": "吗", "pinyin": "ma"}],
     "english": "Are you a student?"},
]


@pytest.fixture
def files(tmp_path):
    exercise_file = tmp_path / "hsk1.json"
    exercise_file.write_text(json.dumps(EXERCISES, ensure_ascii=False), encoding="utf-8")
    word_file = tmp_path / "words.txt"
    word_file.write_text("# most frequent first\n是 我\n学生\n猫\n", encoding="utf-8")
    assumed_file = tmp_path / "known.txt"
    assumed_file.write_text("我\n", encoding="utf-8")
    return exercise_file, word_file, assumed_file


class TestLoaders:
    def test_word_file_skips_comments(self, files):
        _, word_file, _ = files
        assert load_word_file(word_file) == ["是", "我", "学生", "猫"]

    def test_exercise_files(self, files):
        exercise_file, _, _ = files
        exercises = load_exercise_files([exercise_file, exercise_file])
        assert len(exercises) == 6
        assert exercises[0].english == "Hello."

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_file(tmp_path / "nope.txt")

    def test_exercise_file_must_hold_a_list(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError):
            load_exercise_files([path])


class TestPlanCourse:
    def test_plan_with_assumed_words(self, files):
        exercise_file, word_file, assumed_file = files

        plan = plan_course.plan_course(word_file, [exercise_file], assumed_file=assumed_file)

        assert [t.key for t in plan.targets()] == ["是"]
        assert plan.entries[0].sentence.index == 1
        assert [w.key for w in plan.skipped] == ["我", "学生"]
        assert [w.key for w in plan.unresolved] == ["猫"]

    def test_frequency_sort(self, files):
        exercise_file, word_file, _ = files

        plan = plan_course.plan_course(word_file, [exercise_file], frequency_sort=True)

        # 是 and 学生 occur twice, 我 once, 猫 never
        assert [t.key for t in plan.targets()] == ["是"]
        assert [w.key for w in plan.skipped] == ["学生", "我"]

    def test_main_writes_csv(self, files, tmp_path, capsys):
        exercise_file, word_file, _ = files
        output = tmp_path / "plan.csv"

        code = plan_course.main([
            str(word_file), "--exercise-files", str(exercise_file),
            "--output-format", "csv", "--output", str(output),
        ])

        assert code == 0
        assert output.read_text(encoding="utf-8").startswith("position,target,rank")
        assert "Wrote 1 planned sentences" in capsys.readouterr().out

    def test_main_json_to_stdout(self, files, capsys):
        exercise_file, word_file, _ = files

        plan_course.main([str(word_file), "--exercise-files", str(exercise_file),
                          "--output-format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["unresolved"] == ["猫"]

    def test_main_human_report(self, files, capsys):
        exercise_file, word_file, _ = files

        plan_course.main([str(word_file), "--exercise-files", str(exercise_file)])

        out = capsys.readouterr().out
        assert "Costly (early): I am a student." in out
        assert "猫\n  No exercises." in out


class TestLearnerStatus:
    def test_reports_next_word_and_exercise(self, files, monkeypatch, tmp_path, capsys):
        exercise_file, word_file, _ = files
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'learning.db'}")
        monkeypatch.setenv("DEFAULT_USER_ID", "ana")

        learner_status.main(["--word-file", str(word_file),
                             "--exercise-files", str(exercise_file)])

        out = capsys.readouterr().out
        assert "Learner: ana" in out
        assert "Target word: 是" in out
        assert "Next exercise: 我是学生" in out
        assert "Most overdue sentence: 你好。" in out

    def test_known_words_come_from_database(self, files, monkeypatch, tmp_path, capsys):
        exercise_file, word_file, _ = files
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'learning.db'}")
        memory.init_db()
        learner = memory.LearnerModel("ben")
        learner.record_review("是", memory.ReviewOutcome.PERFECT)
        memory.save_learner(learner)

        learner_status.main(["--word-file", str(word_file),
                             "--exercise-files", str(exercise_file), "--user-id", "ben"])

        out = capsys.readouterr().out
        assert "Known words:        1" in out
        assert "Target word: 我" in out


class TestImportExercises:
    def test_dry_run_writes_nothing(self, files, monkeypatch, capsys):
        exercise_file, _, _ = files
        monkeypatch.setattr(import_exercises.corpus_repo, "upsert_exercises",
                            lambda exercises: pytest.fail("should not write"))

        import_exercises.main([str(exercise_file), "--dry-run"])

        out = capsys.readouterr().out
        assert "Loaded 3 exercises" in out
        assert "Distinct words: 6" in out

    def test_upserts_exercises(self, files, monkeypatch, capsys):
        exercise_file, _, _ = files
        written = []
        monkeypatch.setattr(import_exercises.corpus_repo, "upsert_exercises",
                            lambda exercises: written.extend(exercises) or len(exercises))

        import_exercises.main([str(exercise_file)])

        assert [e.english for e in written][0] == "Hello."
        assert "Upserted 3 exercises" in capsys.readouterr().out


class TestResetLearningDb:
    @pytest.fixture
    def saved_word(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'learning.db'}")
        memory.init_db()
        memory.save_word_model("ana", memory.initialize_new_word("猫"))

    def test_cancelled_without_confirmation(self, saved_word, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt: "no")

        assert reset_learning_db.main([]) == 1

        assert memory.load_word_model("ana", "猫") is not None
        assert "Cancelled" in capsys.readouterr().out

    def test_yes_flag_resets(self, saved_word, capsys):
        assert reset_learning_db.main(["--yes"]) == 0

        assert memory.load_word_model("ana", "猫") is None
        out = capsys.readouterr().out
        assert "word_state" in out
        assert "recreated" in out
