"""Answer entity."""

from typing import Optional

from ask.domain.model.common import DomainModel, UtcDatetime, created_field, id_field
from ask.domain.model.profile import AuthorProfile
from ask.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question. Created once, never mutated."""

    id: AnswerId = id_field()
    question_id: QuestionId
    author_id: Optional[UserId] = None
    author: Optional[AuthorProfile] = None
    content: str
    creation_timestamp: Optional[UtcDatetime] = created_field()
