from typing import Iterable, List

from quiz_bank.errors import SchemaValidationError
from quiz_bank.models import Page, Question
from quiz_bank.regexes import IDENTIFIER_RE


def _check_id(value, what: str) -> None:
    if not isinstance(value, str) or not IDENTIFIER_RE.match(value):
        raise SchemaValidationError(f"{what} id {value!r} is not a valid identifier")


def validate_question(q: Question, page_id: str = "?") -> None:
    """
    Check one question against the schema.

    - answers is a tuple and correct_answer a frozenset, both of strings
    - correct answers must all appear verbatim in `answers`
    - single-select questions have exactly one correct answer
    - no duplicate answer options
    """
    where = f"question {q.id!r} on page {page_id!r}"
    _check_id(q.id, f"Question on page {page_id!r}:")

    if not isinstance(q.question, str) or not q.question.strip():
        raise SchemaValidationError(f"{where}: prompt text is empty")

    if not isinstance(q.multi_select, bool):
        raise SchemaValidationError(f"{where}: multiSelect must be a boolean")

    # mutable containers would let callers change a built bank
    if not isinstance(q.answers, tuple):
        raise SchemaValidationError(f"{where}: answers must be a tuple, got {type(q.answers).__name__}")

    if not isinstance(q.correct_answer, frozenset):
        raise SchemaValidationError(
            f"{where}: correct_answer must be a frozenset, got {type(q.correct_answer).__name__}"
        )

    for answer in q.answers:
        if not isinstance(answer, str) or not answer.strip():
            raise SchemaValidationError(f"{where}: empty answer option {answer!r}")

    if not all(isinstance(a, str) for a in q.correct_answer):
        raise SchemaValidationError(f"{where}: correct answers must be strings")

    if len(set(q.answers)) != len(q.answers):
        dupes = sorted({a for a in q.answers if q.answers.count(a) > 1})
        raise SchemaValidationError(f"{where}: duplicate answer options {dupes}")

    if not q.correct_answer:
        raise SchemaValidationError(f"{where}: no correct answer given")

    missing = sorted(q.correct_answer - set(q.answers))
    if missing:
        raise SchemaValidationError(f"{where}: correct answers not in answers list: {missing}")

    if not q.multi_select and len(q.correct_answer) != 1:
        raise SchemaValidationError(
            f"{where}: single-select question has {len(q.correct_answer)} correct answers"
        )


def validate_page(page: Page) -> None:
    _check_id(page.id, "Page")

    if not isinstance(page.questions, tuple):
        raise SchemaValidationError(
            f"page {page.id!r}: questions must be a tuple, got {type(page.questions).__name__}"
        )

    seen: set[str] = set()
    for q in page.questions:
        if not isinstance(q, Question):
            raise SchemaValidationError(f"page {page.id!r}: expected a Question, got {type(q).__name__}")
        validate_question(q, page.id)
        if q.id in seen:
            raise SchemaValidationError(f"Duplicate question id {q.id!r} on page {page.id!r}")
        seen.add(q.id)


def validate_pages(pages: Iterable[Page]) -> List[Page]:
    """Validate every page and check page ids are unique. Returns the pages as a list."""
    result: List[Page] = []
    seen: set[str] = set()

    for page in pages:
        if not isinstance(page, Page):
            raise SchemaValidationError(f"Expected a Page, got {type(page).__name__}")
        validate_page(page)
        if page.id in seen:
            raise SchemaValidationError(f"Duplicate page id {page.id!r}")
        seen.add(page.id)
        result.append(page)

    return result
