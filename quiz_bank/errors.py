from typing import Optional


class QuizBankError(Exception):
    """Base class for question bank errors."""


class NotFoundError(QuizBankError, KeyError):
    """A page or question id did not match anything in the bank."""

    def __init__(self, page_id: str, question_id: Optional[str] = None):
        self.page_id = page_id
        self.question_id = question_id
        if question_id is None:
            message = f"No page with id {page_id!r}"
        else:
            message = f"No question {question_id!r} on page {page_id!r}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class SchemaValidationError(QuizBankError, ValueError):
    """Bank data breaks the page/question schema. Raised at build time."""
