"""Comment entity.

Comments hang off exactly one target: a question or an answer.
"""

from typing import Optional

from pydantic import model_validator

from ask.domain.model.common import DomainModel, UtcDatetime, created_field, id_field
from ask.domain.model.profile import AuthorProfile
from ask.domain.value import (
    AnswerId,
    CommentId,
    QuestionId,
    TargetId,
    TargetType,
    UserId,
)


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - Exactly one of question_id / answer_id is set
    - Immutable once created
    """

    id: CommentId = id_field()
    content: str
    author_id: Optional[UserId] = None
    author: Optional[AuthorProfile] = None
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    creation_timestamp: Optional[UtcDatetime] = created_field()

    @model_validator(mode="after")
    def validate_single_target(self) -> "Comment":
        """Validate that the comment targets a question or an answer, not both."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError(
                "Comment must reference exactly one of question_id or answer_id"
            )
        return self

    @property
    def target_type(self) -> TargetType:
        """Kind of entity the comment is attached to."""
        return TargetType.QUESTION if self.question_id else TargetType.ANSWER

    @property
    def target_id(self) -> TargetId:
        """Id of the entity the comment is attached to."""
        return TargetId(self.question_id or self.answer_id)

    @classmethod
    def for_target(
        cls, target_type: TargetType, target_id: TargetId, **fields
    ) -> "Comment":
        """Build a comment attached to the given target."""
        if target_type == TargetType.QUESTION:
            return cls(question_id=QuestionId(target_id), **fields)
        return cls(answer_id=AnswerId(target_id), **fields)
