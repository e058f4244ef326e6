"""List questions use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from ask.application.usecase.base import BaseUseCase
from ask.config import ListingSettings
from ask.domain.model import Session
from ask.domain.model.read_model import QuestionReadModel
from ask.domain.repository import AnswerRepository, QuestionRepository, TagRepository
from ask.domain.service import (
    PageState,
    VoteService,
    aggregate_question,
    filter_questions,
    paginate,
)
from ask.domain.value import FilterMode, TargetId, TargetType


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    mode: FilterMode = FilterMode.NONE
    query: str = ""
    page: int = Field(default=1, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1, le=100)  # None: settings
    session: Optional[Session] = None  # Current session (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionReadModel]
    page: PageState
    mode: FilterMode
    query: str


class ListQuestionsUseCase(BaseUseCase[ListQuestionsRequest, ListQuestionsResponse]):
    """Use case for the question list: fetch, aggregate, filter, paginate."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        tag_repository: TagRepository,
        answer_repository: AnswerRepository,
        vote_service: VoteService,
        listing: ListingSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_repository: Question repository
            tag_repository: Tag repository
            answer_repository: Answer repository
            vote_service: Vote domain service
            listing: Listing settings (page size, window, snippet length)
        """
        self.question_repository = question_repository
        self.tag_repository = tag_repository
        self.answer_repository = answer_repository
        self.vote_service = vote_service
        self.listing = listing

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filter mode, query, page and session

        Returns:
            One page of display-ready questions and the page state
        """
        with logfire.span(
            "list_questions.execute",
            mode=request.mode.value,
            query=request.query,
            page=request.page,
        ):
            # Full snapshot; the backend does no filtering
            questions = await self.question_repository.find_all()
            tags = await self.tag_repository.find_all()

            question_ids = [q.id for q in questions]
            answer_counts = await self.answer_repository.count_by_questions(
                question_ids
            )
            user_id = request.session.user_id if request.session else None
            vote_summaries = await self.vote_service.summarize(
                TargetType.QUESTION,
                [TargetId(qid) for qid in question_ids],
                user_id,
            )

            tags_by_id = {tag.id: tag for tag in tags}
            read_models = [
                aggregate_question(
                    q,
                    related_tags=[tags_by_id[t] for t in q.tag_ids if t in tags_by_id],
                    vote_summary=vote_summaries.get(TargetId(q.id)),
                    answer_count=answer_counts.get(q.id),
                    snippet_length=self.listing.snippet_length,
                )
                for q in questions
            ]

            filtered = filter_questions(read_models, request.mode, request.query)
            page_items, page_state = paginate(
                filtered,
                page=request.page,
                items_per_page=request.per_page or self.listing.items_per_page,
                sibling_count=self.listing.sibling_count,
            )

            logfire.info(
                "Questions listed",
                total=len(questions),
                matched=len(filtered),
                page=page_state.current_page,
            )

            return ListQuestionsResponse(
                questions=page_items,
                page=page_state,
                mode=request.mode,
                query=request.query,
            )
