"""List tags use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from ask.domain.repository import QuestionRepository
from ask.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    id: str
    name: str
    question_count: int
    creation_timestamp: Optional[datetime]


class ListTagsRequest(BaseModel):
    """List tags request."""

    include_unused: bool = False


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing tags with how many questions use each."""

    def __init__(
        self, tag_service: TagService, question_repository: QuestionRepository
    ) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            question_repository: Question repository
        """
        self.tag_service = tag_service
        self.question_repository = question_repository

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tags ordered by name
        """
        with logfire.span("list_tags.execute", include_unused=request.include_unused):
            tags = await self.tag_service.get_all_tags()
            questions = await self.question_repository.find_all()

            counts = {
                tag.id: count
                for tag, count in self.tag_service.count_questions(tags, questions)
            }

            tag_items = [
                TagItem(
                    id=str(tag.id),
                    name=tag.name.root,
                    question_count=counts.get(tag.id, 0),
                    creation_timestamp=tag.creation_timestamp,
                )
                for tag in tags
                if request.include_unused or tag.id in counts
            ]

            logfire.info("Tags listed", count=len(tag_items))

            return ListTagsResponse(tags=tag_items)
