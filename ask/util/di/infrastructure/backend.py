"""Backing store infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
import logfire
from dishka import Scope, provide

from ask.adapter.http import (
    ForumHttpClient,
    HttpAnswerRepository,
    HttpCommentRepository,
    HttpQuestionRepository,
    HttpTagRepository,
    HttpVoteRepository,
    create_http_client,
)
from ask.config import BackendSettings
from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from ask.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryQuestionRepository,
    InMemoryTagRepository,
    InMemoryVoteRepository,
)
from ask.util.di.base import ProviderBase
from ask.util.observability import instrument_httpx


class BackendProvider(ProviderBase):
    """Backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider.

    Repositories are APP-scoped: the in-memory store must outlive a single
    request, and the HTTP repositories share one connection pool.
    ``backend.kind`` picks the implementation.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def get_http_client(
        self, settings: BackendSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared httpx client, closed with the container.

        Building the client opens no connection, so memory mode can hold
        one unused.
        """
        client = create_http_client(settings)
        if settings.kind == "http":
            instrument_httpx(client)
            logfire.info("Backend client opened", base_url=settings.api_url)
        try:
            yield client
        finally:
            await client.aclose()

    @provide
    def get_forum_client(self, http: httpx.AsyncClient) -> ForumHttpClient:
        """Provide JSON client for the forum REST backend."""
        return ForumHttpClient(http)

    @provide
    def get_question_repository(
        self, settings: BackendSettings, client: ForumHttpClient
    ) -> QuestionRepository:
        """Provide Question repository."""
        if settings.kind == "http":
            return HttpQuestionRepository(client)
        return InMemoryQuestionRepository()

    @provide
    def get_answer_repository(
        self, settings: BackendSettings, client: ForumHttpClient
    ) -> AnswerRepository:
        """Provide Answer repository."""
        if settings.kind == "http":
            return HttpAnswerRepository(client)
        return InMemoryAnswerRepository()

    @provide
    def get_comment_repository(
        self, settings: BackendSettings, client: ForumHttpClient
    ) -> CommentRepository:
        """Provide Comment repository."""
        if settings.kind == "http":
            return HttpCommentRepository(client)
        return InMemoryCommentRepository()

    @provide
    def get_tag_repository(
        self, settings: BackendSettings, client: ForumHttpClient
    ) -> TagRepository:
        """Provide Tag repository."""
        if settings.kind == "http":
            return HttpTagRepository(client)
        return InMemoryTagRepository()

    @provide
    def get_vote_repository(
        self, settings: BackendSettings, client: ForumHttpClient
    ) -> VoteRepository:
        """Provide Vote repository."""
        if settings.kind == "http":
            return HttpVoteRepository(client)
        return InMemoryVoteRepository()
