"""Unit tests for ListTagsUseCase."""

import pytest

from ask.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from ask.domain.repository import QuestionRepository, TagRepository
from tests.conftest import make_question, make_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_tags_with_question_counts(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)
        question_repo = await unit_env.get(QuestionRepository)
        python = await tag_repo.save(make_tag("python"))
        django = await tag_repo.save(make_tag("django"))
        await tag_repo.save(make_tag("unused"))
        await question_repo.save(make_question(tags=[python, django]))
        await question_repo.save(make_question(tags=[python]))
        use_case = await unit_env.get(ListTagsUseCase)

        response = await use_case.execute(ListTagsRequest())

        assert [(t.name, t.question_count) for t in response.tags] == [
            ("django", 1),
            ("python", 2),
        ]

    @pytest.mark.asyncio
    async def test_include_unused(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save(make_tag("unused"))
        use_case = await unit_env.get(ListTagsUseCase)

        response = await use_case.execute(ListTagsRequest(include_unused=True))

        assert [(t.name, t.question_count) for t in response.tags] == [("unused", 0)]
