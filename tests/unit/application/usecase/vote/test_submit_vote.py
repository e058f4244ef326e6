"""Unit tests for SubmitVoteUseCase."""

import pytest

from ask.application.usecase.vote import SubmitVoteRequest, SubmitVoteUseCase
from ask.domain.error import AuthRequiredError
from ask.domain.value import TargetType, VoteType
from tests.conftest import make_session
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitVoteUseCase:
    """Tests for SubmitVoteUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_switch_to_dislike(self, unit_env):
        use_case = await unit_env.get(SubmitVoteUseCase)
        session = make_session()

        liked = await use_case.execute(
            SubmitVoteRequest(
                target_type=TargetType.QUESTION,
                target_id="q1",
                vote_type=VoteType.LIKE,
                session=session,
            )
        )
        disliked = await use_case.execute(
            SubmitVoteRequest(
                target_type=TargetType.QUESTION,
                target_id="q1",
                vote_type=VoteType.DISLIKE,
                session=session,
            )
        )

        assert (liked.likes, liked.dislikes, liked.score) == (1, 0, 1)
        assert (disliked.likes, disliked.dislikes, disliked.score) == (0, 1, -1)
        assert disliked.user_vote == VoteType.DISLIKE
        assert disliked.target_id == "q1"

    @pytest.mark.asyncio
    async def test_toggle_off(self, unit_env):
        use_case = await unit_env.get(SubmitVoteUseCase)
        request = SubmitVoteRequest(
            target_type=TargetType.ANSWER,
            target_id="a1",
            vote_type=VoteType.DISLIKE,
            session=make_session(),
        )

        await use_case.execute(request)
        response = await use_case.execute(request)

        assert response.dislikes == 0
        assert response.user_vote is None

    @pytest.mark.asyncio
    async def test_anonymous_vote(self, unit_env):
        use_case = await unit_env.get(SubmitVoteUseCase)

        with pytest.raises(AuthRequiredError):
            await use_case.execute(
                SubmitVoteRequest(
                    target_type=TargetType.QUESTION,
                    target_id="q1",
                    vote_type=VoteType.LIKE,
                )
            )
