"""Session context passed explicitly into entry points."""

from typing import Optional

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import UserId


class Session(DomainModel):
    """The signed-in user on whose behalf an operation runs.

    Entry points take ``Optional[Session]``; ``None`` means anonymous.
    How the session was obtained is not this package's concern.
    """

    user_id: UserId
    username: str = ""
    display_name: Optional[str] = None
    reputation: int = Field(default=0, ge=0)
