"""Get user profile use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ask.domain.model import Session
from ask.domain.service import ProfileService, format_age
from ask.domain.service.aggregation import ANONYMOUS


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    session: Optional[Session] = None  # Current session (if authenticated)


class ProfileStats(BaseModel):
    """Activity totals for response."""

    questions_asked: int
    answers_posted: int
    comments_posted: int


class ProfileQuestionItem(BaseModel):
    """One of the user's own questions for response."""

    id: str
    title: str
    description: str
    views: int
    creation_timestamp: Optional[datetime]
    age: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    username: str
    display_name: str
    reputation: int
    stats: ProfileStats
    questions: list[ProfileQuestionItem]


class GetUserProfileUseCase:
    """Use case for the signed-in user's profile page."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get user profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Steps:
        1. Load the session user's questions and activity totals
        2. Return profile fields, stats and questions newest first

        Args:
            request: Request with the current session

        Returns:
            Profile of the signed-in user

        Raises:
            AuthRequiredError: If there is no session
        """
        stats, questions = await self.profile_service.get_activity(request.session)
        session = request.session

        return GetUserProfileResponse(
            user_id=str(session.user_id),
            username=session.username,
            display_name=session.display_name or session.username or ANONYMOUS,
            reputation=session.reputation,
            stats=ProfileStats(
                questions_asked=stats.questions_asked,
                answers_posted=stats.answers_posted,
                comments_posted=stats.comments_posted,
            ),
            questions=[
                ProfileQuestionItem(
                    id=str(q.id),
                    title=q.title,
                    description=q.description,
                    views=q.views,
                    creation_timestamp=q.creation_timestamp,
                    age=format_age(q.creation_timestamp),
                )
                for q in questions
            ],
        )
