"""Unit tests for VoteService."""

import asyncio
from unittest.mock import patch
from uuid import uuid4

import pytest

from ask.domain.error import AuthRequiredError, NetworkError, VoteInFlightError
from ask.domain.model import VoteAction, VoteKey
from ask.domain.repository import VoteRepository
from ask.domain.service import VoteGuard, VoteService, plan_transition
from ask.domain.value import TargetId, TargetType, UserId, VoteType
from tests.conftest import make_session
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _target() -> TargetId:
    return TargetId(str(uuid4()))


class TestPlanTransition:
    """Tests for the pure transition planner."""

    def _key(self) -> VoteKey:
        return VoteKey(
            user_id=UserId("u1"), target_type=TargetType.QUESTION, target_id=_target()
        )

    def test_no_vote_creates(self):
        """Voting on an empty slot creates a row."""
        transition = plan_transition(self._key(), None, VoteType.LIKE)

        assert transition.action == VoteAction.CREATE
        assert transition.previous is None
        assert transition.next == VoteType.LIKE
        assert transition.vote is not None
        assert transition.vote.vote_type == VoteType.LIKE

    def test_same_type_deletes(self):
        """Submitting the stored type again removes the vote."""
        key = self._key()
        existing = plan_transition(key, None, VoteType.DISLIKE).vote

        transition = plan_transition(key, existing, VoteType.DISLIKE)

        assert transition.action == VoteAction.DELETE
        assert transition.previous == VoteType.DISLIKE
        assert transition.next is None
        assert transition.vote is None

    def test_other_type_updates_in_place(self):
        """Switching type keeps the row id."""
        key = self._key()
        existing = plan_transition(key, None, VoteType.LIKE).vote

        transition = plan_transition(key, existing, VoteType.DISLIKE)

        assert transition.action == VoteAction.UPDATE
        assert transition.vote.id == existing.id
        assert transition.vote.vote_type == VoteType.DISLIKE


class TestSubmitVote:
    """Tests for submit_vote."""

    @pytest.mark.asyncio
    async def test_like_on_empty_slot(self, unit_env):
        """First like counts once and is reported as the user's vote."""
        service = await unit_env.get(VoteService)
        session = make_session()

        counts = await service.submit_vote(
            session, TargetType.QUESTION, _target(), VoteType.LIKE
        )

        assert counts.likes == 1
        assert counts.dislikes == 0
        assert counts.score == 1
        assert counts.user_vote == VoteType.LIKE

    @pytest.mark.asyncio
    async def test_like_twice_toggles_off(self, unit_env):
        """Like, like leaves no vote and the counts where they started."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        session = make_session()
        target = _target()

        before = await service.get_counts(TargetType.QUESTION, target)
        await service.submit_vote(session, TargetType.QUESTION, target, VoteType.LIKE)
        after = await service.submit_vote(
            session, TargetType.QUESTION, target, VoteType.LIKE
        )

        assert after.likes == before.likes
        assert after.dislikes == before.dislikes
        assert after.user_vote is None
        stored = await vote_repo.find_by_user_and_target(
            session.user_id, TargetType.QUESTION, target
        )
        assert stored is None

    @pytest.mark.asyncio
    async def test_like_then_dislike_switches(self, unit_env):
        """Like, dislike keeps one row and moves the score by two."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        session = make_session()
        target = _target()

        liked = await service.submit_vote(
            session, TargetType.ANSWER, target, VoteType.LIKE
        )
        switched = await service.submit_vote(
            session, TargetType.ANSWER, target, VoteType.DISLIKE
        )

        assert switched.likes == liked.likes - 1
        assert switched.dislikes == liked.dislikes + 1
        assert switched.score == liked.score - 2
        assert switched.user_vote == VoteType.DISLIKE

        votes = await vote_repo.find_by_targets(TargetType.ANSWER, [target])
        assert len(votes) == 1
        assert votes[0].vote_type == VoteType.DISLIKE

    @pytest.mark.asyncio
    async def test_at_most_one_vote_per_user_and_target(self, unit_env):
        """Any sequence of submissions leaves at most one row per user."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        alice = make_session("alice")
        bob = make_session("bob")
        target = _target()

        sequence = [
            (alice, VoteType.LIKE),
            (bob, VoteType.DISLIKE),
            (alice, VoteType.DISLIKE),
            (alice, VoteType.LIKE),
            (bob, VoteType.DISLIKE),
            (bob, VoteType.LIKE),
            (alice, VoteType.LIKE),
            (alice, VoteType.DISLIKE),
        ]
        for session, vote_type in sequence:
            await service.submit_vote(session, TargetType.QUESTION, target, vote_type)
            votes = await vote_repo.find_by_targets(TargetType.QUESTION, [target])
            users = [v.user_id for v in votes]
            assert len(users) == len(set(users))

        counts = await service.get_counts(TargetType.QUESTION, target, alice.user_id)
        assert counts.likes == 1  # bob
        assert counts.dislikes == 1  # alice
        assert counts.score == 0
        assert counts.user_vote == VoteType.DISLIKE

    @pytest.mark.asyncio
    async def test_anonymous_vote_rejected_without_write(self, unit_env):
        """Voting without a session raises and writes nothing."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        target = _target()

        with pytest.raises(AuthRequiredError, match="vote"):
            await service.submit_vote(None, TargetType.QUESTION, target, VoteType.LIKE)

        assert await vote_repo.find_by_targets(TargetType.QUESTION, [target]) == []

    @pytest.mark.asyncio
    async def test_network_failure_leaves_state_unchanged(self, unit_env):
        """A failed write leaves the stored vote and counts as they were."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        session = make_session()
        target = _target()

        liked = await service.submit_vote(
            session, TargetType.QUESTION, target, VoteType.LIKE
        )

        with patch.object(
            vote_repo,
            "apply",
            side_effect=NetworkError("submit vote", "connection refused"),
        ):
            with pytest.raises(NetworkError):
                await service.submit_vote(
                    session, TargetType.QUESTION, target, VoteType.DISLIKE
                )

        counts = await service.get_counts(TargetType.QUESTION, target, session.user_id)
        assert counts == liked

    @pytest.mark.asyncio
    async def test_second_submission_while_in_flight_rejected(self, unit_env):
        """A vote on a key that is still being applied fails fast."""
        service = await unit_env.get(VoteService)
        guard = await unit_env.get(VoteGuard)
        vote_repo = await unit_env.get(VoteRepository)
        session = make_session()
        target = _target()

        release = asyncio.Event()
        original_apply = vote_repo.apply

        async def slow_apply(transition):
            await release.wait()
            await original_apply(transition)

        with patch.object(vote_repo, "apply", side_effect=slow_apply):
            first = asyncio.create_task(
                service.submit_vote(
                    session, TargetType.QUESTION, target, VoteType.LIKE
                )
            )
            await asyncio.sleep(0)

            key = VoteKey(
                user_id=session.user_id,
                target_type=TargetType.QUESTION,
                target_id=target,
            )
            assert guard.is_in_flight(key)

            with pytest.raises(VoteInFlightError):
                await service.submit_vote(
                    session, TargetType.QUESTION, target, VoteType.LIKE
                )

            release.set()
            counts = await first

        assert counts.likes == 1
        assert not guard.is_in_flight(key)

    @pytest.mark.asyncio
    async def test_guard_released_after_failure(self, unit_env):
        """A failed submission does not block the next one."""
        service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        session = make_session()
        target = _target()

        with patch.object(
            vote_repo, "apply", side_effect=NetworkError("submit vote", "timeout")
        ):
            with pytest.raises(NetworkError):
                await service.submit_vote(
                    session, TargetType.QUESTION, target, VoteType.LIKE
                )

        counts = await service.submit_vote(
            session, TargetType.QUESTION, target, VoteType.LIKE
        )
        assert counts.likes == 1


class TestSummarize:
    """Tests for summarize."""

    @pytest.mark.asyncio
    async def test_targets_without_votes_are_zeroed(self, unit_env):
        """Every requested target appears, voted on or not."""
        service = await unit_env.get(VoteService)
        session = make_session()
        voted, silent = _target(), _target()

        await service.submit_vote(session, TargetType.QUESTION, voted, VoteType.LIKE)

        summary = await service.summarize(
            TargetType.QUESTION, [voted, silent], session.user_id
        )

        assert summary[voted].likes == 1
        assert summary[voted].user_vote == VoteType.LIKE
        assert summary[silent].likes == 0
        assert summary[silent].dislikes == 0
        assert summary[silent].user_vote is None

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        """No targets, no work."""
        service = await unit_env.get(VoteService)

        assert await service.summarize(TargetType.ANSWER, []) == {}

    @pytest.mark.asyncio
    async def test_target_types_are_separate(self, unit_env):
        """A question and an answer with the same id count separately."""
        service = await unit_env.get(VoteService)
        session = make_session()
        target = _target()

        await service.submit_vote(session, TargetType.QUESTION, target, VoteType.LIKE)

        answer_counts = await service.get_counts(TargetType.ANSWER, target)
        assert answer_counts.likes == 0
