"""Get question use case."""

from collections import defaultdict
from typing import Optional

import logfire
from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.model import Comment, Session
from ask.domain.model.read_model import (
    AnswerReadModel,
    CommentReadModel,
    QuestionReadModel,
)
from ask.domain.repository import AnswerRepository, CommentRepository, TagRepository
from ask.domain.service import (
    QuestionService,
    VoteService,
    aggregate_answer,
    aggregate_comment,
    aggregate_question,
)
from ask.domain.value import QuestionId, TargetId, TargetType


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    session: Optional[Session] = None  # Current session (if authenticated)


class GetQuestionResponse(BaseModel):
    """Question detail: the question, its comments, and its answers."""

    question: QuestionReadModel
    comments: list[CommentReadModel]
    answers: list[AnswerReadModel]


class GetQuestionUseCase(BaseUseCase[GetQuestionRequest, GetQuestionResponse]):
    """Use case for the question detail page."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_repository: TagRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            tag_repository: Tag repository
            answer_repository: Answer repository
            comment_repository: Comment repository
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.tag_repository = tag_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Loading the detail counts as a view.

        Args:
            request: Question ID and optional session

        Returns:
            Display-ready question detail

        Raises:
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(request.question_id)
        user_id = request.session.user_id if request.session else None

        with logfire.span("get_question.execute", question_id=question_id):
            question = await self.question_service.open_question(question_id)

            tags = await self.tag_repository.find_all()
            tags_by_id = {tag.id: tag for tag in tags}

            answers = await self.answer_repository.find_by_question(question_id)
            answer_ids = [TargetId(a.id) for a in answers]

            question_counts = await self.vote_service.get_counts(
                TargetType.QUESTION, TargetId(question_id), user_id
            )
            answer_counts = await self.vote_service.summarize(
                TargetType.ANSWER, answer_ids, user_id
            )

            question_comments = await self.comment_repository.find_by_targets(
                TargetType.QUESTION, [TargetId(question_id)]
            )
            answer_comments = await self.comment_repository.find_by_targets(
                TargetType.ANSWER, answer_ids
            )
            comments_by_answer: dict[TargetId, list[Comment]] = defaultdict(list)
            for comment in answer_comments:
                comments_by_answer[comment.target_id].append(comment)

            logfire.info(
                "Question loaded",
                answers=len(answers),
                comments=len(question_comments) + len(answer_comments),
            )

            return GetQuestionResponse(
                question=aggregate_question(
                    question,
                    related_tags=[
                        tags_by_id[t] for t in question.tag_ids if t in tags_by_id
                    ],
                    vote_summary=question_counts,
                    answer_count=len(answers),
                ),
                comments=[aggregate_comment(c) for c in question_comments],
                answers=[
                    aggregate_answer(
                        a,
                        vote_summary=answer_counts.get(TargetId(a.id)),
                        comments=comments_by_answer.get(TargetId(a.id)),
                    )
                    for a in answers
                ],
            )
