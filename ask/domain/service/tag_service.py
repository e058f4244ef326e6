"""Tag domain service."""

from collections import Counter
from typing import Sequence
from uuid import uuid4

import logfire

from ask.domain.model.common import utc_now
from ask.domain.model.question import Question
from ask.domain.model.tag import Tag
from ask.domain.repository.tag import TagRepository
from ask.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def ensure_tags(self, names: Sequence[str]) -> list[Tag]:
        """Look up tags by name, creating the missing ones.

        Args:
            names: Normalized tag names

        Returns:
            One tag per name, in the given order
        """
        with logfire.span("tag_service.ensure_tags", tags=list(names)):
            wanted = [TagName(name) for name in names]
            existing = await self.tag_repository.find_by_names(wanted)

            tags: list[Tag] = []
            for name in wanted:
                tag = next((t for t in existing if t.name.matches(name)), None)
                if tag is None:
                    tag = await self.tag_repository.save(
                        Tag(
                            id=TagId(str(uuid4())),
                            name=name,
                            creation_timestamp=utc_now(),
                        )
                    )
                    logfire.info("Tag created", tag_name=name.root)
                tags.append(tag)
            return tags

    @staticmethod
    def count_questions(
        tags: Sequence[Tag], questions: Sequence[Question]
    ) -> list[tuple[Tag, int]]:
        """Pair each tag with the number of questions using it.

        Tags no question uses are left out.
        """
        usage = Counter(tag_id for q in questions for tag_id in set(q.tag_ids))
        return [(tag, usage[tag.id]) for tag in tags if usage[tag.id] > 0]
