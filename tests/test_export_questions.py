import json
import sys

from quiz_bank.questions import QUIZ_QUESTIONS
from scripts import export_questions


def test_export_with_answers(tmp_path, monkeypatch, capsys):
    path = tmp_path / "out" / "question_bank.json"
    monkeypatch.setattr(sys, "argv", ["export_questions.py", "--output", str(path)])
    export_questions.main()

    assert "1 pages and 2 questions" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8")) == QUIZ_QUESTIONS


def test_export_without_answers(tmp_path, monkeypatch):
    path = tmp_path / "client.json"
    monkeypatch.setattr(sys, "argv", ["export_questions.py", "--output", str(path), "--no-answers"])
    export_questions.main()

    data = json.loads(path.read_text(encoding="utf-8"))
    assert [q["id"] for q in data[0]["questions"]] == ["all_same", "when_same"]
    assert all("correctAnswer" not in q for q in data[0]["questions"])
