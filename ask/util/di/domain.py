"""Domain layer DI providers."""

from dishka import Scope, provide

from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from ask.domain.service import (
    AnswerService,
    CommentService,
    ProfileService,
    QuestionService,
    TagService,
    VoteGuard,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped. The vote guard is APP-scoped: it
    must see every in-flight vote, whichever request started it.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_vote_guard(self) -> VoteGuard:
        """Provide the application-wide in-flight vote guard."""
        return VoteGuard()

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, vote_guard: VoteGuard
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, vote_guard=vote_guard)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_profile_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
        )
