from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, Tuple

from quiz_bank.errors import NotFoundError
from quiz_bank.models import Page, Question
from quiz_bank.parsing import build_question_bank
from quiz_bank.questions import QUIZ_QUESTIONS
from quiz_bank.validation import validate_pages


class QuestionBank:
    """
    Read-only catalog of quiz pages.

    Pages are validated once here; lookups afterwards can assume a clean
    catalog. Nothing mutates a bank after construction, so one instance can
    be shared freely.
    """

    def __init__(self, pages: Iterable[Page]):
        self._pages: Tuple[Page, ...] = tuple(validate_pages(pages))
        self._by_id: Dict[str, Page] = {p.id: p for p in self._pages}
        self._questions: Dict[Tuple[str, str], Question] = {
            (p.id, q.id): q for p in self._pages for q in p.questions
        }

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "QuestionBank":
        return cls(build_question_bank(records))

    @property
    def pages(self) -> Tuple[Page, ...]:
        return self._pages

    def page_ids(self) -> Tuple[str, ...]:
        return tuple(self._by_id)

    def get_page(self, page_id: str) -> Page:
        try:
            return self._by_id[page_id]
        except KeyError:
            raise NotFoundError(page_id) from None

    def get_question(self, page_id: str, question_id: str) -> Question:
        # page miss reports the page, not the question
        self.get_page(page_id)
        try:
            return self._questions[(page_id, question_id)]
        except KeyError:
            raise NotFoundError(page_id, question_id) from None

    def is_correct(self, page_id: str, question_id: str, submitted_answers: Iterable[str]) -> bool:
        """True only if the submitted set equals the correct set exactly."""
        return self.get_question(page_id, question_id).is_correct(submitted_answers)

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __contains__(self, page_id) -> bool:
        return page_id in self._by_id

    def __repr__(self) -> str:
        return f"QuestionBank(pages={list(self._by_id)!r})"


@lru_cache(maxsize=None)
def default_bank() -> QuestionBank:
    """The built-in bank from QUIZ_QUESTIONS, built on first use."""
    return QuestionBank.from_records(QUIZ_QUESTIONS)
