"""Unit tests for AskQuestionUseCase."""

import pytest

from ask.application.usecase.question import AskQuestionRequest, AskQuestionUseCase
from ask.domain.error import AuthRequiredError, ValidationError
from ask.domain.repository import QuestionRepository
from tests.conftest import make_session
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAskQuestionUseCase:
    """Tests for AskQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_ask_question(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)

        response = await use_case.execute(
            AskQuestionRequest(
                title="What is a monad?",
                description="Asking for a friend",
                tag_names=["Haskell", "fp"],
                session=make_session(),
            )
        )

        assert response.title == "What is a monad?"
        assert response.tag_names == ["haskell", "fp"]
        stored = await question_repo.find_by_id(response.question_id)
        assert stored is not None
        assert len(stored.tag_ids) == 2

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(
                AskQuestionRequest(title="T", description="D", tag_names=["x"])
            )

    @pytest.mark.asyncio
    async def test_no_tags_rejected(self, unit_env):
        use_case = await unit_env.get(AskQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)

        with pytest.raises(ValidationError, match="at least one tag"):
            await use_case.execute(
                AskQuestionRequest(
                    title="T", description="D", tag_names=[], session=make_session()
                )
            )

        assert await question_repo.find_all() == []
