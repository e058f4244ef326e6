"""In-memory question repository."""

from typing import Optional

from ask.domain.model.question import Question
from ask.domain.repository.question import QuestionRepository
from ask.domain.value import QuestionId, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_all(self) -> list[Question]:
        """Return every question in insertion order."""
        return list(self._questions.values())

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_by_author(self, author_id: UserId) -> list[Question]:
        """Find questions asked by one user."""
        return [q for q in self._questions.values() if q.author_id == author_id]

    async def record_view(self, question_id: QuestionId) -> Optional[Question]:
        """Increment a question's view count."""
        question = self._questions.get(question_id)
        if question is None:
            return None

        updated = question.model_copy(update={"views": question.views + 1})
        self._questions[question_id] = updated
        return updated

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question
