"""In-memory implementation of Tag repository."""

from copy import deepcopy
from typing import Sequence

from ask.domain.model.tag import Tag
from ask.domain.repository.tag import TagRepository
from ask.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._tags: dict[TagId, Tag] = {}
        self._name_index: dict[str, TagId] = {}

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = sorted(self._tags.values(), key=lambda t: t.name.normalized)
        return [deepcopy(tag) for tag in tags]

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find tags by name, ignoring case."""
        tags = []
        for name in names:
            tag_id = self._name_index.get(name.normalized)
            if tag_id is not None:
                tags.append(deepcopy(self._tags[tag_id]))
        return tags

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = deepcopy(tag)
        self._name_index[tag.name.normalized] = tag.id
        return deepcopy(tag)
