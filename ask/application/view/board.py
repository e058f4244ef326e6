"""Question list view state."""

from typing import Optional

import logfire

from ask.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from ask.domain.error import DomainError, NetworkError
from ask.domain.model import Session
from ask.domain.model.read_model import QuestionReadModel
from ask.domain.service import PageState
from ask.domain.value import FilterMode

from .sequencer import FetchSequencer


class QuestionBoard:
    """State behind the question list: current page, filter and last error.

    Each load issues a fetch ticket. Results for superseded tickets are
    dropped so the board always shows the most recently requested view.
    """

    def __init__(self, list_questions: ListQuestionsUseCase) -> None:
        """Initialize question board.

        Args:
            list_questions: List questions use case
        """
        self.list_questions = list_questions
        self.sequencer = FetchSequencer()
        self.response: Optional[ListQuestionsResponse] = None
        self.last_error: Optional[DomainError] = None

    @property
    def questions(self) -> list[QuestionReadModel]:
        return self.response.questions if self.response else []

    @property
    def page(self) -> Optional[PageState]:
        return self.response.page if self.response else None

    async def load(
        self,
        mode: FilterMode = FilterMode.NONE,
        query: str = "",
        page: int = 1,
        session: Optional[Session] = None,
    ) -> Optional[ListQuestionsResponse]:
        """Fetch and apply one page of questions.

        Args:
            mode: Filter mode
            query: Search text or tag name
            page: Requested page (clamped into range)
            session: Current session (if authenticated)

        Returns:
            The applied response, or None if the fetch failed or was
            superseded by a newer load
        """
        ticket = self.sequencer.issue()

        try:
            response = await self.list_questions.execute(
                ListQuestionsRequest(
                    mode=mode, query=query, page=max(page, 1), session=session
                )
            )
        except NetworkError as error:
            if self.sequencer.is_current(ticket):
                self._report(error)
            return None

        if not self.sequencer.is_current(ticket):
            logfire.info(
                "Stale question list discarded",
                ticket=ticket,
                latest=self.sequencer.latest,
            )
            return None

        self.response = response
        self.last_error = None
        return response

    async def go_to_page(
        self, page: int, session: Optional[Session] = None
    ) -> Optional[ListQuestionsResponse]:
        """Reload with the current filter on another page."""
        if self.response is None:
            return await self.load(page=page, session=session)
        return await self.load(
            mode=self.response.mode,
            query=self.response.query,
            page=page,
            session=session,
        )

    def take_error(self) -> Optional[DomainError]:
        """Return the pending error and clear it, so it is shown only once."""
        error, self.last_error = self.last_error, None
        return error

    def _report(self, error: DomainError) -> None:
        logfire.warn("Question list failed to load", error=str(error))
        self.last_error = error
