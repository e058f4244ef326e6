"""In-memory comment repository."""

from typing import Sequence

from ask.domain.model.comment import Comment
from ask.domain.model.common import oldest_first
from ask.domain.repository.comment import CommentRepository
from ask.domain.value import TargetId, TargetType, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> list[Comment]:
        """Find comments on several targets, oldest first."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        comments = [
            c
            for c in self._comments
            if c.target_type == target_type and c.target_id in wanted
        ]
        return sorted(comments, key=oldest_first)

    async def count_by_author(self, author_id: UserId) -> int:
        """Count comments posted by one user."""
        return sum(1 for c in self._comments if c.author_id == author_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments.append(comment)
        return comment
