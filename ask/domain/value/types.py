"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Literal

from pydantic import field_validator

from ask.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Type of vote."""

    LIKE = "like"
    DISLIKE = "dislike"


class TargetType(str, Enum):
    """Type of entity that can be voted or commented on."""

    QUESTION = "question"
    ANSWER = "answer"


class FilterMode(str, Enum):
    """How a text query is matched against questions."""

    NONE = "none"
    SEARCH = "search"  # Substring of title or description
    TAG = "tag"  # Exact tag name


# Marker token between page numbers in pagination controls
ELLIPSIS: Literal["..."] = "..."

PageToken = int | Literal["..."]


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Stored as submitted (trimmed). Matching is case-insensitive.
    Examples: 'react', 'Python', 'machine-learning'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 30:
            raise ValueError("Tag name must be 1-30 characters")
        return v

    @property
    def normalized(self) -> str:
        """Case-folded form used for comparisons."""
        return self.root.casefold()

    def matches(self, other: "str | TagName") -> bool:
        """Case-insensitive equality against another name."""
        other_value = other.root if isinstance(other, TagName) else other
        return self.normalized == other_value.strip().casefold()
