from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class Question:
    id: str                      # unique within its page, never shown to users
    question: str
    multi_select: bool
    answers: Tuple[str, ...]     # display order
    correct_answer: FrozenSet[str] = field(default_factory=frozenset)

    def is_correct(self, submitted) -> bool:
        """
        Exact set match: every correct option picked and nothing else.

        `submitted` is an iterable of answer strings. A bare str or bytes
        raises TypeError instead of being split into characters.
        """
        if isinstance(submitted, (str, bytes)):
            raise TypeError(
                f"submitted answers must be a collection of strings, not {type(submitted).__name__}"
            )
        return frozenset(submitted) == self.correct_answer


@dataclass(frozen=True)
class Page:
    id: str
    questions: Tuple[Question, ...] = ()

    def question_ids(self) -> Tuple[str, ...]:
        return tuple(q.id for q in self.questions)
