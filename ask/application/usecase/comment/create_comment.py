"""Create comment use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ask.domain.model import Session
from ask.domain.service import CommentService
from ask.domain.value import TargetId, TargetType


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    target_type: TargetType
    target_id: str
    content: str
    session: Optional[Session] = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    target_type: TargetType
    target_id: str
    content: str
    creation_timestamp: Optional[datetime]


class CreateCommentUseCase:
    """Use case for commenting on a question or answer."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored comment

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the content is blank
        """
        comment = await self.comment_service.post_comment(
            session=request.session,
            target_type=request.target_type,
            target_id=TargetId(request.target_id),
            content=request.content,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            target_type=comment.target_type,
            target_id=str(comment.target_id),
            content=comment.content,
            creation_timestamp=comment.creation_timestamp,
        )
