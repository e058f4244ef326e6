"""Application layer DI providers."""

from dishka import Scope, provide

from ask.application.usecase.answer import CreateAnswerUseCase
from ask.application.usecase.comment import CreateCommentUseCase
from ask.application.usecase.question import (
    AskQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from ask.application.usecase.tag import ListTagsUseCase
from ask.application.usecase.user import GetUserProfileUseCase
from ask.application.usecase.vote import SubmitVoteUseCase
from ask.application.view import QuestionBoard, QuestionThread
from ask.config import ListingSettings
from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
)
from ask.domain.service import (
    AnswerService,
    CommentService,
    ProfileService,
    QuestionService,
    TagService,
    VoteService,
)
from ask.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_repository: QuestionRepository,
        tag_repository: TagRepository,
        answer_repository: AnswerRepository,
        vote_service: VoteService,
        listing: ListingSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_repository=question_repository,
            tag_repository=tag_repository,
            answer_repository=answer_repository,
            vote_service=vote_service,
            listing=listing,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        tag_repository: TagRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            tag_repository=tag_repository,
            answer_repository=answer_repository,
            comment_repository=comment_repository,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self, question_service: QuestionService
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(question_service=question_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    # Answer and comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, question_repository: QuestionRepository
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, question_repository=question_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, tag_service: TagService, question_repository: QuestionRepository
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(
            tag_service=tag_service, question_repository=question_repository
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(profile_service=profile_service)

    # View state
    @provide(scope=Scope.REQUEST)
    def get_question_board(
        self, list_questions: ListQuestionsUseCase
    ) -> QuestionBoard:
        """Provide question list view state."""
        return QuestionBoard(list_questions=list_questions)

    @provide(scope=Scope.REQUEST)
    def get_question_thread(
        self,
        get_question: GetQuestionUseCase,
        submit_vote: SubmitVoteUseCase,
        create_answer: CreateAnswerUseCase,
        create_comment: CreateCommentUseCase,
    ) -> QuestionThread:
        """Provide question detail view state."""
        return QuestionThread(
            get_question=get_question,
            submit_vote=submit_vote,
            create_answer=create_answer,
            create_comment=create_comment,
        )
