"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ask.domain.model.tag import Tag
from ask.domain.value import TagName


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_all(self) -> List[Tag]:
        """Find all tags.

        Returns:
            All tags ordered by name
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: Sequence[TagName]) -> List[Tag]:
        """Find tags by name, ignoring case.

        Args:
            names: Tag names to look up

        Returns:
            The tags that exist (unknown names are skipped)
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save a new tag.

        Args:
            tag: The tag to save

        Returns:
            The saved tag
        """
        pass
