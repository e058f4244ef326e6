"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from ask.domain.model.answer import Answer
from ask.domain.value import QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question's ID

        Returns:
            Answers to the question, oldest first
        """
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> Dict[QuestionId, int]:
        """Count answers for several questions (batch query).

        Args:
            question_ids: Question IDs to count for

        Returns:
            Mapping of question ID to answer count (missing means zero)
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count the answers one user has posted."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass
