"""In-memory answer repository."""

from collections import Counter
from typing import Sequence

from ask.domain.model.answer import Answer
from ask.domain.model.common import oldest_first
from ask.domain.repository.answer import AnswerRepository
from ask.domain.value import QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository."""

    def __init__(self) -> None:
        self._answers: list[Answer] = []

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find answers to a question, oldest first."""
        answers = [a for a in self._answers if a.question_id == question_id]
        return sorted(answers, key=oldest_first)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers per question."""
        wanted = set(question_ids)
        counts = Counter(a.question_id for a in self._answers if a.question_id in wanted)
        return dict(counts)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers posted by one user."""
        return sum(1 for a in self._answers if a.author_id == author_id)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers.append(answer)
        return answer
