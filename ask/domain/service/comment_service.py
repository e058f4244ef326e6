"""Comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from ask.domain.error import AuthRequiredError, ValidationError
from ask.domain.model.common import utc_now
from ask.domain.model.comment import Comment
from ask.domain.model.session import Session
from ask.domain.repository import CommentRepository
from ask.domain.value import CommentId, TargetId, TargetType

from .base import Service
from .question_service import author_of


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def post_comment(
        self,
        session: Optional[Session],
        target_type: TargetType,
        target_id: TargetId,
        content: str,
    ) -> Comment:
        """Comment on a question or an answer.

        Args:
            session: Current session (None when anonymous)
            target_type: Question or answer
            target_id: Target ID
            content: Comment text

        Returns:
            The stored comment

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the content is blank
        """
        if session is None:
            raise AuthRequiredError("comment")
        if not content.strip():
            raise ValidationError("Comment cannot be empty")

        with logfire.span(
            "comment_service.post_comment",
            target_type=target_type.value,
            target_id=target_id,
            user_id=session.user_id,
        ):
            comment = Comment.for_target(
                target_type,
                target_id,
                id=CommentId(str(uuid4())),
                content=content.strip(),
                author_id=session.user_id,
                author=author_of(session),
                creation_timestamp=utc_now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment posted", comment_id=saved.id)
            return saved
