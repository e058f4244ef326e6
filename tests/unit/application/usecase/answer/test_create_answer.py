"""Unit tests for CreateAnswerUseCase."""

from unittest.mock import patch

import pytest

from ask.application.usecase.answer import CreateAnswerRequest, CreateAnswerUseCase
from ask.domain.error import AuthRequiredError, NotFoundError, ValidationError
from ask.domain.repository import AnswerRepository, QuestionRepository
from tests.conftest import make_question, make_session
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateAnswerUseCase:
    """Tests for CreateAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_create_answer(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        use_case = await unit_env.get(CreateAnswerUseCase)

        response = await use_case.execute(
            CreateAnswerRequest(
                question_id=question.id,
                content="  Try display: grid  ",
                session=make_session(),
            )
        )

        assert response.content == "Try display: grid"
        answers = await answer_repo.find_by_question(question.id)
        assert [a.id for a in answers] == [response.answer_id]

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        use_case = await unit_env.get(CreateAnswerUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateAnswerRequest(
                    question_id="missing", content="Hi", session=make_session()
                )
            )

    @pytest.mark.asyncio
    async def test_checks_run_before_any_fetch(self, unit_env):
        """Anonymous or empty answers never touch the store."""
        question_repo = await unit_env.get(QuestionRepository)
        use_case = await unit_env.get(CreateAnswerUseCase)

        with patch.object(question_repo, "find_by_id") as find_by_id:
            with pytest.raises(AuthRequiredError):
                await use_case.execute(
                    CreateAnswerRequest(question_id="q1", content="Hi")
                )
            with pytest.raises(ValidationError):
                await use_case.execute(
                    CreateAnswerRequest(
                        question_id="q1", content="  ", session=make_session()
                    )
                )

        find_by_id.assert_not_called()
