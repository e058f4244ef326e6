"""Question aggregate root.

Questions are the primary content type: a title, a free-text description
and an ordered list of tags. Title and description never change after
submission; only the view count moves.
"""

from typing import Optional

from pydantic import Field

from ask.domain.model.common import DomainModel, UtcDatetime, created_field, id_field
from ask.domain.model.profile import AuthorProfile
from ask.domain.value import QuestionId, TagId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Relations to the author profile and tags are optional: listings from
    some backends embed them, others only carry references.
    """

    id: QuestionId = id_field()
    title: str
    description: str = ""
    author_id: Optional[UserId] = None
    author: Optional[AuthorProfile] = None
    creation_timestamp: Optional[UtcDatetime] = created_field()
    views: int = Field(default=0, ge=0)
    tag_ids: list[TagId] = Field(default_factory=list)  # Ordered as submitted
