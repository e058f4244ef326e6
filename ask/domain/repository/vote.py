"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ask.domain.model.vote import Vote, VoteTransition
from ask.domain.value import TargetId, TargetType, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence and adapter layers.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: TargetId,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (question or answer)
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> List[Vote]:
        """Find all votes on several targets (batch query).

        Args:
            target_type: Type of targets
            target_ids: IDs of the targets

        Returns:
            Votes on any of the targets
        """
        pass

    @abstractmethod
    async def apply(self, transition: VoteTransition) -> None:
        """Apply a planned vote transition atomically.

        Creates, updates in place, or deletes the single row for
        ``transition.key``. The check against ``transition.previous`` and
        the write happen as one operation.

        Args:
            transition: The transition to apply

        Raises:
            VoteConflictError: If the stored vote type differs from
                ``transition.previous``
            NetworkError: If the store is unreachable
        """
        pass
