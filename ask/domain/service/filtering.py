"""Question filtering and ordering."""

from datetime import datetime
from typing import Optional, Protocol, Sequence, TypeVar

from ask.domain.model.common import sort_newest_first
from ask.domain.value import FilterMode


class Filterable(Protocol):
    """Anything the filter engine can match against."""

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def tag_names(self) -> Sequence[str]: ...

    @property
    def creation_timestamp(self) -> Optional[datetime]: ...


Q = TypeVar("Q", bound=Filterable)


def matches(question: Filterable, mode: FilterMode, query: str) -> bool:
    """Whether a single question passes the filter.

    An empty query matches everything in every mode. The query is used
    as typed, surrounding whitespace included.
    """
    needle = query.casefold()
    if mode == FilterMode.NONE or not needle:
        return True

    if mode == FilterMode.SEARCH:
        return (
            needle in question.title.casefold()
            or needle in question.description.casefold()
        )

    # FilterMode.TAG: exact name, never substring
    return any(name.casefold() == needle for name in question.tag_names)


def filter_questions(
    questions: Sequence[Q], mode: FilterMode, query: str = ""
) -> list[Q]:
    """Filter questions and order them newest first.

    The input is left untouched. Questions created at the same instant keep
    their input order; questions without a timestamp come last.

    Args:
        questions: Questions to filter
        mode: How to match the query
        query: Search text or tag name

    Returns:
        Matching questions by descending creation timestamp
    """
    return sort_newest_first([q for q in questions if matches(q, mode, query)])
