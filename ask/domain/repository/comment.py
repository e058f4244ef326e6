"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ask.domain.model.comment import Comment
from ask.domain.value import TargetId, TargetType, UserId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> List[Comment]:
        """Find comments on several targets (batch query).

        Args:
            target_type: Type of targets (question or answer)
            target_ids: IDs of the targets

        Returns:
            Comments on any of the targets, oldest first
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count the comments one user has posted on questions and answers."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
