"""Question detail view state."""

from typing import Optional

import logfire

from ask.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from ask.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from ask.application.usecase.question import (
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from ask.application.usecase.vote import (
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from ask.domain.error import DomainError, NetworkError, NotFoundError
from ask.domain.model import Session
from ask.domain.value import TargetType, VoteType

from .sequencer import FetchSequencer


class QuestionThread:
    """State behind the question detail page.

    Holds the loaded detail, the unsent answer and comment drafts, and the
    last failure. Vote counts change only when the store confirms the vote.
    A failed submission keeps its draft; a successful one clears it and
    reloads the thread.
    """

    def __init__(
        self,
        get_question: GetQuestionUseCase,
        submit_vote: SubmitVoteUseCase,
        create_answer: CreateAnswerUseCase,
        create_comment: CreateCommentUseCase,
    ) -> None:
        """Initialize question thread.

        Args:
            get_question: Get question use case
            submit_vote: Submit vote use case
            create_answer: Create answer use case
            create_comment: Create comment use case
        """
        self.get_question = get_question
        self.submit_vote = submit_vote
        self.create_answer = create_answer
        self.create_comment = create_comment
        self.sequencer = FetchSequencer()

        self.question_id: Optional[str] = None
        self.detail: Optional[GetQuestionResponse] = None
        self.not_found = False
        self.last_error: Optional[DomainError] = None

        self.answer_draft = ""
        self.comment_draft = ""
        self.comment_target: Optional[tuple[TargetType, str]] = None

    async def load(
        self, question_id: str, session: Optional[Session] = None
    ) -> Optional[GetQuestionResponse]:
        """Fetch the question detail.

        A missing question leaves the thread empty with `not_found` set.

        Returns:
            The applied detail, or None
        """
        ticket = self.sequencer.issue()
        if question_id != self.question_id:
            self.detail = None
            self.not_found = False
        self.question_id = question_id

        try:
            detail = await self.get_question.execute(
                GetQuestionRequest(question_id=question_id, session=session)
            )
        except NotFoundError:
            if self.sequencer.is_current(ticket):
                self.detail = None
                self.not_found = True
            return None
        except NetworkError as error:
            if self.sequencer.is_current(ticket):
                self._report(error)
            return None

        if not self.sequencer.is_current(ticket):
            logfire.info("Stale question detail discarded", question_id=question_id)
            return None

        self.detail = detail
        self.not_found = False
        return detail

    async def vote(
        self,
        target_type: TargetType,
        target_id: str,
        vote_type: VoteType,
        session: Optional[Session] = None,
    ) -> Optional[SubmitVoteResponse]:
        """Like or dislike the question or one of its answers.

        Returns:
            The confirmed counts, or None if the vote was not applied
        """
        try:
            response = await self.submit_vote.execute(
                SubmitVoteRequest(
                    target_type=target_type,
                    target_id=target_id,
                    vote_type=vote_type,
                    session=session,
                )
            )
        except DomainError as error:
            self._report(error)
            return None

        self._apply_counts(response)
        return response

    async def post_answer(self, session: Optional[Session] = None) -> bool:
        """Submit the answer draft.

        Returns:
            True if the answer was stored
        """
        if self.question_id is None:
            return False

        try:
            await self.create_answer.execute(
                CreateAnswerRequest(
                    question_id=self.question_id,
                    content=self.answer_draft,
                    session=session,
                )
            )
        except DomainError as error:
            self._report(error)
            return False

        self.answer_draft = ""
        await self.load(self.question_id, session)
        return True

    def start_comment(self, target_type: TargetType, target_id: str) -> None:
        """Open the comment form under the question or an answer."""
        if self.comment_target != (target_type, target_id):
            self.comment_draft = ""
        self.comment_target = (target_type, target_id)

    async def post_comment(self, session: Optional[Session] = None) -> bool:
        """Submit the comment draft to the current comment target.

        Returns:
            True if the comment was stored
        """
        if self.question_id is None or self.comment_target is None:
            return False

        target_type, target_id = self.comment_target
        try:
            await self.create_comment.execute(
                CreateCommentRequest(
                    target_type=target_type,
                    target_id=target_id,
                    content=self.comment_draft,
                    session=session,
                )
            )
        except DomainError as error:
            self._report(error)
            return False

        self.comment_draft = ""
        self.comment_target = None
        await self.load(self.question_id, session)
        return True

    def take_error(self) -> Optional[DomainError]:
        """Return the pending error and clear it, so it is shown only once."""
        error, self.last_error = self.last_error, None
        return error

    def _apply_counts(self, response: SubmitVoteResponse) -> None:
        if self.detail is None:
            return

        counts = {
            "likes": response.likes,
            "dislikes": response.dislikes,
            "score": response.score,
            "user_vote": response.user_vote,
        }
        if response.target_type == TargetType.QUESTION:
            if self.detail.question.id == response.target_id:
                self.detail = self.detail.model_copy(
                    update={"question": self.detail.question.model_copy(update=counts)}
                )
            return

        answers = [
            answer.model_copy(update=counts)
            if answer.id == response.target_id
            else answer
            for answer in self.detail.answers
        ]
        self.detail = self.detail.model_copy(update={"answers": answers})

    def _report(self, error: DomainError) -> None:
        logfire.warn(
            "Question thread action failed",
            question_id=self.question_id,
            error=str(error),
        )
        self.last_error = error
