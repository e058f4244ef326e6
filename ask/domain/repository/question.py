"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ask.domain.model.question import Question
from ask.domain.value import QuestionId, UserId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence and adapter layers.
    """

    @abstractmethod
    async def find_all(self) -> List[Question]:
        """Fetch a full snapshot of all questions.

        No server-side filtering or ordering is assumed.

        Returns:
            Every question
        """
        pass

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Question]:
        """Find every question asked by one user.

        Args:
            author_id: The author's user ID

        Returns:
            The user's questions, in no particular order
        """
        pass

    @abstractmethod
    async def record_view(self, question_id: QuestionId) -> Optional[Question]:
        """Increment a question's view count.

        Args:
            question_id: The question's unique identifier

        Returns:
            The updated question, or None if it does not exist
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question as stored
        """
        pass
