"""Domain services."""

from .aggregation import (
    aggregate_answer,
    aggregate_comment,
    aggregate_question,
    format_age,
)
from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .filtering import filter_questions
from .pagination import PageState, compute_range, paginate
from .profile_service import ProfileService
from .question_service import QuestionService
from .tag_service import TagService
from .vote_guard import VoteGuard
from .vote_service import VoteService, plan_transition

__all__ = [
    "AnswerService",
    "CommentService",
    "PageState",
    "ProfileService",
    "QuestionService",
    "Service",
    "TagService",
    "VoteGuard",
    "VoteService",
    "aggregate_answer",
    "aggregate_comment",
    "aggregate_question",
    "compute_range",
    "filter_questions",
    "format_age",
    "paginate",
    "plan_transition",
]
