"""Unit tests for QuestionBoard."""

import asyncio
from unittest.mock import patch

import pytest

from ask.application.usecase.question import ListQuestionsUseCase
from ask.application.view import FetchSequencer, QuestionBoard
from ask.domain.error import NetworkError
from ask.domain.repository import QuestionRepository
from ask.domain.value import FilterMode
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestFetchSequencer:
    def test_only_latest_ticket_is_current(self):
        sequencer = FetchSequencer()

        first = sequencer.issue()
        second = sequencer.issue()

        assert second > first
        assert not sequencer.is_current(first)
        assert sequencer.is_current(second)


class TestQuestionBoard:
    """Tests for QuestionBoard."""

    @pytest.mark.asyncio
    async def test_load_applies_response(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question(title="Only one"))
        board = await unit_env.get(QuestionBoard)

        response = await board.load()

        assert response is not None
        assert [q.title for q in board.questions] == ["Only one"]
        assert board.page.current_page == 1

    @pytest.mark.asyncio
    async def test_superseded_load_is_discarded(self, unit_env):
        """A slow earlier fetch never overwrites a newer one."""
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question(title="Slow path"))
        use_case = await unit_env.get(ListQuestionsUseCase)
        board = QuestionBoard(list_questions=use_case)

        gate = asyncio.Event()
        real_execute = use_case.execute

        async def execute(request):
            if request.query == "slow":
                await gate.wait()
            return await real_execute(request)

        with patch.object(use_case, "execute", side_effect=execute):
            slow = asyncio.create_task(board.load(FilterMode.SEARCH, "slow"))
            await asyncio.sleep(0)

            newest = await board.load(FilterMode.TAG, "rust")
            gate.set()
            stale = await slow

        assert stale is None
        assert newest is not None
        assert board.response is newest
        assert board.response.mode == FilterMode.TAG
        assert board.questions == []

    @pytest.mark.asyncio
    async def test_network_error_reported_once_and_state_kept(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        await question_repo.save(make_question())
        use_case = await unit_env.get(ListQuestionsUseCase)
        board = QuestionBoard(list_questions=use_case)
        previous = await board.load()

        with patch.object(
            use_case, "execute", side_effect=NetworkError("list questions", "offline")
        ) as execute:
            result = await board.load(page=2)

        assert result is None
        assert execute.await_count == 1  # no retry
        assert board.response is previous
        assert isinstance(board.take_error(), NetworkError)
        assert board.take_error() is None

    @pytest.mark.asyncio
    async def test_go_to_page_keeps_filter(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        for i in range(15):
            await question_repo.save(make_question(title=f"Match {i}"))
        await question_repo.save(make_question(title="Other"))
        board = await unit_env.get(QuestionBoard)

        await board.load(FilterMode.SEARCH, "match")
        await board.go_to_page(2)

        assert board.response.query == "match"
        assert board.page.current_page == 2
        assert len(board.questions) == 5
