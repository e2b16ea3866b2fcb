import json
from typing import Any, Dict, Iterable, List

from quiz_bank.errors import SchemaValidationError
from quiz_bank.models import Page, Question


PAGE_FIELDS = {"id", "questions"}
QUESTION_FIELDS = {"id", "question", "multiSelect", "answers", "correctAnswer"}


# ---------- RECORDS -> MODELS ----------

def _check_fields(record, expected: set, where: str) -> None:
    if not isinstance(record, dict):
        raise SchemaValidationError(f"{where}: expected an object, got {type(record).__name__}")

    missing = expected - record.keys()
    if missing:
        raise SchemaValidationError(f"{where}: missing fields {sorted(missing)}")

    unknown = record.keys() - expected
    if unknown:
        raise SchemaValidationError(f"{where}: unknown fields {sorted(unknown)}")


def _string_list(value, field_name: str, where: str) -> List[str]:
    if not isinstance(value, (list, tuple)):
        raise SchemaValidationError(f"{where}: {field_name} must be a list")
    if not all(isinstance(v, str) for v in value):
        raise SchemaValidationError(f"{where}: {field_name} must contain only strings")
    return list(value)


def parse_question_record(record: Dict[str, Any], page_id: str = "?") -> Question:
    qid = record.get("id", "?") if isinstance(record, dict) else "?"
    where = f"question {qid!r} on page {page_id!r}"
    _check_fields(record, QUESTION_FIELDS, where)

    answers = _string_list(record["answers"], "answers", where)
    correct = _string_list(record["correctAnswer"], "correctAnswer", where)

    # a repeated entry would quietly shrink the set
    if len(set(correct)) != len(correct):
        raise SchemaValidationError(f"{where}: correctAnswer lists the same option twice")

    return Question(
        id=record["id"],
        question=record["question"],
        multi_select=record["multiSelect"],
        answers=tuple(answers),
        correct_answer=frozenset(correct),
    )


def parse_page_record(record: Dict[str, Any]) -> Page:
    page_id = record.get("id", "?") if isinstance(record, dict) else "?"
    _check_fields(record, PAGE_FIELDS, f"page {page_id!r}")

    raw_questions = record["questions"]
    if not isinstance(raw_questions, (list, tuple)):
        raise SchemaValidationError(f"page {page_id!r}: questions must be a list")

    return Page(
        id=record["id"],
        questions=tuple(parse_question_record(q, page_id) for q in raw_questions),
    )


def build_question_bank(records: Iterable[Dict[str, Any]]) -> List[Page]:
    """Turn raw page records (camelCase, as in QUIZ_QUESTIONS) into Page objects."""
    if isinstance(records, (str, bytes, dict)):
        raise SchemaValidationError("Question bank must be a list of page objects")
    return [parse_page_record(r) for r in records]


# ---------- MODELS -> RECORDS ----------

def question_to_dict(q: Question, include_answers: bool = True) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": q.id,
        "question": q.question,
        "multiSelect": q.multi_select,
        "answers": list(q.answers),
    }
    if include_answers:
        # keep display order so the output is stable
        data["correctAnswer"] = [a for a in q.answers if a in q.correct_answer]
    return data


def page_to_dict(page: Page, include_answers: bool = True) -> Dict[str, Any]:
    """
    Serialize a page with the camelCase field names.

    include_answers=False drops `correctAnswer`, which is what a quiz
    client should receive.
    """
    return {
        "id": page.id,
        "questions": [question_to_dict(q, include_answers) for q in page.questions],
    }


# ---------- JSON ----------

def save_question_bank_json(pages: Iterable[Page], output_path: str, include_answers: bool = True):
    data = [page_to_dict(p, include_answers) for p in pages]
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    print(f"Wrote question bank to {output_path}")


def load_question_bank_json(path: str) -> List[Page]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return build_question_bank(data)
