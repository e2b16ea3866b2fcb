import copy
import json
import sys

import pytest

from quiz_bank.bank import QuestionBank, default_bank
from quiz_bank.questions import QUIZ_QUESTIONS
from scripts import check_bank


def test_no_duplicate_prompts_in_default_bank():
    assert check_bank.find_duplicate_prompts(default_bank()) == {}


def test_duplicate_prompts_across_pages():
    records = copy.deepcopy(QUIZ_QUESTIONS)
    second = copy.deepcopy(records[0])
    second["id"] = "pg2"
    second["questions"] = second["questions"][:1]
    second["questions"][0]["question"] = "  ARE all the objects in this task the same?"
    records.append(second)

    dupes = check_bank.find_duplicate_prompts(QuestionBank.from_records(records))
    assert dupes == {
        "are all the objects in this task the same?": ["pg1/all_same", "pg2/all_same"],
    }


def test_main_reports_invalid_bank(tmp_path, monkeypatch, capsys):
    records = copy.deepcopy(QUIZ_QUESTIONS)
    records[0]["questions"][0]["correctAnswer"] = ["Maybe"]
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(records), encoding="utf-8")

    monkeypatch.setattr(sys, "argv", ["check_bank.py", str(path)])
    with pytest.raises(SystemExit) as exc:
        check_bank.main()

    assert exc.value.code == 1
    assert "Invalid question bank" in capsys.readouterr().out


def test_main_summary(tmp_path, monkeypatch, capsys):
    path = tmp_path / "question_bank.json"
    path.write_text(json.dumps(QUIZ_QUESTIONS), encoding="utf-8")

    monkeypatch.setattr(sys, "argv", ["check_bank.py", str(path)])
    check_bank.main()

    out = capsys.readouterr().out
    assert "Pages     : 1" in out
    assert "Questions : 2 (0 multi-select)" in out
    assert "No duplicate prompts found" in out


def test_main_reports_bad_json(tmp_path, monkeypatch, capsys):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")

    monkeypatch.setattr(sys, "argv", ["check_bank.py", str(path)])
    with pytest.raises(SystemExit) as exc:
        check_bank.main()

    assert exc.value.code == 1
    assert "Invalid question bank" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["check_bank.py", str(tmp_path / "nope.json")])
    with pytest.raises(SystemExit) as exc:
        check_bank.main()

    assert exc.value.code == 1
    assert "Invalid question bank" in capsys.readouterr().out
