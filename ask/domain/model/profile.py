"""Author profiles and per-user activity totals."""

from typing import Optional

from pydantic import Field

from ask.domain.model.common import ID_ALIASES, DomainModel
from ask.domain.value import UserId
from ask.domain.value.common import ValueObject


class AuthorProfile(DomainModel):
    """Public profile fields of a content author.

    Source data is often partially populated, so every field has a default.
    """

    id: Optional[UserId] = Field(default=None, validation_alias=ID_ALIASES)
    username: Optional[str] = None
    display_name: Optional[str] = None
    reputation: Optional[int] = Field(default=None, ge=0)
    avatar_url: Optional[str] = None


class UserStats(ValueObject):
    """Activity totals shown on a user's profile."""

    questions_asked: int = 0
    answers_posted: int = 0
    comments_posted: int = 0
