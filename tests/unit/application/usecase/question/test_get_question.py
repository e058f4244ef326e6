"""Unit tests for GetQuestionUseCase."""

import pytest

from ask.application.usecase.question import GetQuestionRequest, GetQuestionUseCase
from ask.domain.error import NotFoundError
from ask.domain.repository import AnswerRepository, QuestionRepository, TagRepository
from ask.domain.service import CommentService, VoteService
from ask.domain.value import TargetId, TargetType, VoteType
from tests.conftest import make_answer, make_question, make_session, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_detail_assembles_answers_comments_and_votes(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        tag_repo = await unit_env.get(TagRepository)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        session = make_session()

        css = await tag_repo.save(make_tag("css"))
        question = await question_repo.save(make_question(tags=[css]))
        answer = await answer_repo.save(make_answer(question))

        await comment_service.post_comment(
            session, TargetType.QUESTION, TargetId(question.id), "Which browser?"
        )
        await comment_service.post_comment(
            session, TargetType.ANSWER, TargetId(answer.id), "Worked for me"
        )
        await vote_service.submit_vote(
            session, TargetType.ANSWER, TargetId(answer.id), VoteType.LIKE
        )

        use_case = await unit_env.get(GetQuestionUseCase)
        detail = await use_case.execute(
            GetQuestionRequest(question_id=question.id, session=session)
        )

        assert detail.question.tag_names == ["css"]
        assert detail.question.answer_count == 1
        assert detail.question.views == 1
        assert [c.content for c in detail.comments] == ["Which browser?"]
        assert len(detail.answers) == 1
        assert detail.answers[0].likes == 1
        assert detail.answers[0].user_vote == VoteType.LIKE
        assert [c.content for c in detail.answers[0].comments] == ["Worked for me"]

    @pytest.mark.asyncio
    async def test_each_load_counts_a_view(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())
        use_case = await unit_env.get(GetQuestionUseCase)

        await use_case.execute(GetQuestionRequest(question_id=question.id))
        detail = await use_case.execute(GetQuestionRequest(question_id=question.id))

        assert detail.question.views == 2

    @pytest.mark.asyncio
    async def test_unknown_question(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id="nope"))
