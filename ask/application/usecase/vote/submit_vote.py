"""Submit vote use case."""

from typing import Optional

from pydantic import BaseModel

from ask.domain.model import Session
from ask.domain.service import VoteService
from ask.domain.value import TargetId, TargetType, VoteType


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    target_type: TargetType
    target_id: str
    vote_type: VoteType
    session: Optional[Session] = None  # Current session (if authenticated)


class SubmitVoteResponse(BaseModel):
    """Counts for the target after the vote."""

    target_type: TargetType
    target_id: str
    likes: int
    dislikes: int
    score: int
    user_vote: Optional[VoteType] = None


class SubmitVoteUseCase:
    """Use case for liking or disliking a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Submitting the same type as the current vote removes it; the
        other type switches it.

        Args:
            request: Submit vote request

        Returns:
            Updated counts and the caller's resulting vote

        Raises:
            AuthRequiredError: If there is no session
            VoteInFlightError: If a vote on the same target is pending
            NetworkError: If the store could not be reached
        """
        counts = await self.vote_service.submit_vote(
            session=request.session,
            target_type=request.target_type,
            target_id=TargetId(request.target_id),
            vote_type=request.vote_type,
        )

        return SubmitVoteResponse(
            target_type=request.target_type,
            target_id=request.target_id,
            likes=counts.likes,
            dislikes=counts.dislikes,
            score=counts.score,
            user_vote=counts.user_vote,
        )
