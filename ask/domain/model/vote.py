"""Vote entity and vote state machine types.

Each user holds at most one vote per target (question or answer). The vote
is either a like or a dislike; submitting the same type again removes it.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, computed_field

from ask.domain.model.common import DomainModel, UtcDatetime, created_field, id_field
from ask.domain.value import TargetId, TargetType, UserId, VoteId, VoteType
from ask.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (user, target type, target id)
    - Switching like <-> dislike updates the row in place
    """

    id: VoteId = id_field()
    user_id: UserId
    target_type: TargetType
    target_id: TargetId
    vote_type: VoteType
    creation_timestamp: Optional[UtcDatetime] = created_field()

    @property
    def key(self) -> "VoteKey":
        """Identity of the (user, target) slot this vote occupies."""
        return VoteKey(
            user_id=self.user_id,
            target_type=self.target_type,
            target_id=self.target_id,
        )


class VoteKey(ValueObject):
    """The (user, target) pair a vote belongs to."""

    user_id: UserId
    target_type: TargetType
    target_id: TargetId


class VoteState(str, Enum):
    """State of a single (user, target) slot."""

    NONE = "none"
    LIKED = "liked"
    DISLIKED = "disliked"

    @classmethod
    def of(cls, vote_type: Optional[VoteType]) -> "VoteState":
        """State holding the given vote type (None means no vote)."""
        if vote_type is None:
            return cls.NONE
        return cls.LIKED if vote_type == VoteType.LIKE else cls.DISLIKED


class VoteAction(str, Enum):
    """Store operation a transition needs."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class VoteTransition(DomainModel):
    """A planned move between vote states for one key.

    ``previous`` is the stored vote type the plan was made against; stores
    refuse to apply the transition if that no longer holds.
    """

    key: VoteKey
    action: VoteAction
    submitted: VoteType
    previous: Optional[VoteType] = None
    next: Optional[VoteType] = None
    vote: Optional[Vote] = None  # Row to write (None for DELETE)

    @property
    def from_state(self) -> VoteState:
        return VoteState.of(self.previous)

    @property
    def to_state(self) -> VoteState:
        return VoteState.of(self.next)


class AggregateCounts(ValueObject):
    """Derived like/dislike totals for one target.

    Recomputed on every read, never persisted.
    """

    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)
    user_vote: Optional[VoteType] = None  # Requesting user's vote, if any

    @computed_field
    @property
    def score(self) -> int:
        """Net score (likes minus dislikes)."""
        return self.likes - self.dislikes

    @classmethod
    def from_votes(
        cls, votes: list[Vote], user_id: Optional[UserId] = None
    ) -> "AggregateCounts":
        """Count the votes of a single target."""
        likes = sum(1 for v in votes if v.vote_type == VoteType.LIKE)
        dislikes = sum(1 for v in votes if v.vote_type == VoteType.DISLIKE)
        user_vote = None
        if user_id is not None:
            user_vote = next(
                (v.vote_type for v in votes if v.user_id == user_id), None
            )
        return cls(likes=likes, dislikes=dislikes, user_vote=user_vote)
