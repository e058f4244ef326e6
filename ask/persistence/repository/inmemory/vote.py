"""In-memory vote repository."""

from typing import Optional, Sequence

from ask.domain.error import VoteConflictError
from ask.domain.model.vote import Vote, VoteAction, VoteKey, VoteTransition
from ask.domain.repository.vote import VoteRepository
from ask.domain.value import TargetId, TargetType, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository.

    Rows are keyed by (user, target), so a second row for the same key
    cannot exist.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: TargetId,
    ) -> Optional[Vote]:
        """Find a vote by user and target."""
        key = VoteKey(user_id=user_id, target_type=target_type, target_id=target_id)
        return self._votes.get(key)

    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> list[Vote]:
        """Find votes on several targets (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self._votes.values()
            if v.target_type == target_type and v.target_id in wanted
        ]

    async def apply(self, transition: VoteTransition) -> None:
        """Apply a transition after checking the stored state.

        Raises:
            VoteConflictError: If the stored vote type is not the one planned against
            ValueError: If a create or update carries no row to write
        """
        key = transition.key
        current = self._votes.get(key)
        current_type = current.vote_type if current else None

        if current_type != transition.previous:
            raise VoteConflictError(key.target_type.value, key.target_id)

        if transition.action == VoteAction.DELETE:
            del self._votes[key]
            return

        if transition.vote is None:
            raise ValueError(f"{transition.action.value} transition has no vote row")
        self._votes[key] = transition.vote
