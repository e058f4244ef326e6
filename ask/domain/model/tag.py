"""Tag entity for categorizing questions."""

from typing import Optional

from ask.domain.model.common import DomainModel, UtcDatetime, created_field, id_field
from ask.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    Questions carry 1-5 tags. Names are unique ignoring case.
    """

    id: TagId = id_field()
    name: TagName
    creation_timestamp: Optional[UtcDatetime] = created_field()
