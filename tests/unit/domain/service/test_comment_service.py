"""Unit tests for CommentService and AnswerService."""

import pytest

from ask.domain.error import AuthRequiredError, ValidationError
from ask.domain.repository import AnswerRepository, CommentRepository
from ask.domain.service import AnswerService, CommentService
from ask.domain.value import QuestionId, TargetId, TargetType
from tests.conftest import make_session
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestPostComment:
    """Tests for post_comment."""

    @pytest.mark.asyncio
    async def test_comment_on_answer(self, unit_env):
        """Comment is attached to the answer only."""
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        session = make_session()

        comment = await service.post_comment(
            session, TargetType.ANSWER, TargetId("a1"), "  Nice one  "
        )

        assert comment.content == "Nice one"
        assert comment.answer_id == "a1"
        assert comment.question_id is None
        assert comment.target_type == TargetType.ANSWER

        on_answer = await comment_repo.find_by_targets(
            TargetType.ANSWER, [TargetId("a1")]
        )
        on_question = await comment_repo.find_by_targets(
            TargetType.QUESTION, [TargetId("a1")]
        )
        assert [c.id for c in on_answer] == [comment.id]
        assert on_question == []

    @pytest.mark.asyncio
    async def test_requires_session(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(AuthRequiredError, match="comment"):
            await service.post_comment(
                None, TargetType.QUESTION, TargetId("q1"), "Hello"
            )

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError):
            await service.post_comment(
                make_session(), TargetType.QUESTION, TargetId("q1"), "   "
            )

        assert (
            await comment_repo.find_by_targets(TargetType.QUESTION, [TargetId("q1")])
            == []
        )


class TestPostAnswer:
    """Tests for post_answer."""

    @pytest.mark.asyncio
    async def test_answers_listed_oldest_first(self, unit_env):
        service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        session = make_session()

        first = await service.post_answer(session, QuestionId("q1"), "First")
        second = await service.post_answer(session, QuestionId("q1"), "Second")
        await service.post_answer(session, QuestionId("q2"), "Elsewhere")

        answers = await answer_repo.find_by_question(QuestionId("q1"))
        assert [a.id for a in answers] == [first.id, second.id]

        counts = await answer_repo.count_by_questions(
            [QuestionId("q1"), QuestionId("q2"), QuestionId("q3")]
        )
        assert counts[QuestionId("q1")] == 2
        assert counts[QuestionId("q2")] == 1
        assert counts.get(QuestionId("q3"), 0) == 0

    @pytest.mark.asyncio
    async def test_requires_session(self, unit_env):
        service = await unit_env.get(AnswerService)

        with pytest.raises(AuthRequiredError, match="answer"):
            await service.post_answer(None, QuestionId("q1"), "Hello")

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        service = await unit_env.get(AnswerService)

        with pytest.raises(ValidationError, match="empty"):
            await service.post_answer(make_session(), QuestionId("q1"), "\n")
