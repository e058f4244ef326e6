"""Vote domain service.

Every (user, target) slot is a three-state machine:

    NONE     --like-->     LIKED       (create row)
    NONE     --dislike-->  DISLIKED    (create row)
    LIKED    --like-->     NONE        (delete row)
    DISLIKED --dislike-->  NONE        (delete row)
    LIKED    --dislike-->  DISLIKED    (update row in place)
    DISLIKED --like-->     LIKED       (update row in place)
"""

from collections import defaultdict
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from ask.domain.error import AuthRequiredError, VoteConflictError
from ask.domain.model.common import utc_now
from ask.domain.model.session import Session
from ask.domain.model.vote import (
    AggregateCounts,
    Vote,
    VoteAction,
    VoteKey,
    VoteTransition,
)
from ask.domain.repository import VoteRepository
from ask.domain.value import TargetId, TargetType, UserId, VoteId, VoteType

from .base import Service
from .vote_guard import VoteGuard


def plan_transition(
    key: VoteKey,
    existing: Optional[Vote],
    submitted: VoteType,
    now: Optional[datetime] = None,
) -> VoteTransition:
    """Work out the transition a submission causes.

    Args:
        key: The (user, target) slot
        existing: The vote currently stored for the slot, if any
        submitted: The vote type the user just submitted
        now: Creation time for a new row (defaults to the current time)

    Returns:
        The transition to apply
    """
    if existing is None:
        vote = Vote(
            id=VoteId(str(uuid4())),
            user_id=key.user_id,
            target_type=key.target_type,
            target_id=key.target_id,
            vote_type=submitted,
            creation_timestamp=now or utc_now(),
        )
        return VoteTransition(
            key=key,
            action=VoteAction.CREATE,
            submitted=submitted,
            previous=None,
            next=submitted,
            vote=vote,
        )

    if existing.vote_type == submitted:
        # Same type again toggles the vote off
        return VoteTransition(
            key=key,
            action=VoteAction.DELETE,
            submitted=submitted,
            previous=existing.vote_type,
            next=None,
            vote=None,
        )

    return VoteTransition(
        key=key,
        action=VoteAction.UPDATE,
        submitted=submitted,
        previous=existing.vote_type,
        next=submitted,
        vote=existing.model_copy(update={"vote_type": submitted}),
    )


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository, vote_guard: VoteGuard) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            vote_guard: Application-wide in-flight guard
        """
        self.vote_repository = vote_repository
        self.vote_guard = vote_guard

    async def submit_vote(
        self,
        session: Optional[Session],
        target_type: TargetType,
        target_id: TargetId,
        vote_type: VoteType,
    ) -> AggregateCounts:
        """Submit a like or dislike and return the target's new counts.

        Args:
            session: Current session (None when anonymous)
            target_type: Question or answer
            target_id: Target ID
            vote_type: Submitted vote type

        Returns:
            Counts for the target after the transition

        Raises:
            AuthRequiredError: If there is no session (nothing is written)
            VoteInFlightError: If a vote on the same target is still running
            VoteConflictError: If the stored vote changed under the plan
            NetworkError: If the store is unreachable (state unchanged)
        """
        if session is None:
            logfire.warn(
                "Anonymous vote attempt",
                target_type=target_type.value,
                target_id=target_id,
            )
            raise AuthRequiredError("vote")

        key = VoteKey(
            user_id=session.user_id, target_type=target_type, target_id=target_id
        )

        async with self.vote_guard.claim(key):
            with logfire.span(
                "vote_service.submit_vote",
                user_id=session.user_id,
                target_type=target_type.value,
                target_id=target_id,
                vote_type=vote_type.value,
            ):
                existing = await self.vote_repository.find_by_user_and_target(
                    session.user_id, target_type, target_id
                )
                transition = plan_transition(key, existing, vote_type)

                try:
                    await self.vote_repository.apply(transition)
                except VoteConflictError:
                    logfire.warn(
                        "Vote changed concurrently",
                        user_id=session.user_id,
                        target_id=target_id,
                        expected=transition.from_state.value,
                    )
                    raise

                logfire.info(
                    "Vote transition applied",
                    action=transition.action.value,
                    from_state=transition.from_state.value,
                    to_state=transition.to_state.value,
                )

                return await self.get_counts(target_type, target_id, session.user_id)

    async def get_counts(
        self,
        target_type: TargetType,
        target_id: TargetId,
        user_id: Optional[UserId] = None,
    ) -> AggregateCounts:
        """Count likes and dislikes on a single target.

        Args:
            target_type: Question or answer
            target_id: Target ID
            user_id: User whose own vote to report (optional)

        Returns:
            Aggregate counts for the target
        """
        votes = await self.vote_repository.find_by_targets(target_type, [target_id])
        return AggregateCounts.from_votes(votes, user_id)

    async def summarize(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
        user_id: Optional[UserId] = None,
    ) -> dict[TargetId, AggregateCounts]:
        """Count likes and dislikes for several targets at once.

        Args:
            target_type: Question or answer
            target_ids: Target IDs
            user_id: User whose own votes to report (optional)

        Returns:
            Mapping of target ID to counts; targets without votes are zeroed
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_targets(target_type, target_ids)

        by_target: dict[TargetId, list[Vote]] = defaultdict(list)
        for vote in votes:
            by_target[vote.target_id].append(vote)

        return {
            tid: AggregateCounts.from_votes(by_target.get(tid, []), user_id)
            for tid in target_ids
        }
