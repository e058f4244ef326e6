"""Repository implementations backed by the forum REST backend."""

from typing import Optional, Sequence

import logfire

from ask.adapter.error import BackendConflictError
from ask.adapter.http.client import ForumHttpClient
from ask.adapter.http.mappers import (
    answer_to_payload,
    comment_to_payload,
    payload_to_answer,
    payload_to_comment,
    payload_to_question,
    payload_to_tag,
    payload_to_vote,
    question_to_payload,
    tag_to_payload,
    transition_to_payload,
)
from ask.domain.error import NotFoundError, VoteConflictError
from ask.domain.model import Answer, Comment, Question, Tag, Vote
from ask.domain.model.common import oldest_first
from ask.domain.model.vote import VoteTransition
from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
    TagRepository,
    VoteRepository,
)
from ask.domain.value import QuestionId, TagName, TargetId, TargetType, UserId


def _join(ids: Sequence[str]) -> str:
    return ",".join(ids)


class HttpQuestionRepository(QuestionRepository):
    """QuestionRepository over the REST backend."""

    def __init__(self, client: ForumHttpClient) -> None:
        self.client = client

    async def find_all(self) -> list[Question]:
        body = await self.client.get("/questions", "fetch questions")
        return [payload_to_question(q) for q in body.get("questions") or []]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        try:
            body = await self.client.get(f"/questions/{question_id}", "fetch question")
        except NotFoundError:
            return None
        return payload_to_question(body["question"]) if body.get("question") else None

    async def find_by_author(self, author_id: UserId) -> list[Question]:
        body = await self.client.get(
            "/questions", "fetch questions by author", author_id=author_id
        )
        return [payload_to_question(q) for q in body.get("questions") or []]

    async def record_view(self, question_id: QuestionId) -> Optional[Question]:
        try:
            body = await self.client.post(
                f"/questions/{question_id}/views", "record question view"
            )
        except NotFoundError:
            return None
        return payload_to_question(body["question"]) if body.get("question") else None

    async def save(self, question: Question) -> Question:
        body = await self.client.post(
            "/questions", "create question", question_to_payload(question)
        )
        return payload_to_question(body.get("question") or question_to_payload(question))


class HttpAnswerRepository(AnswerRepository):
    """AnswerRepository over the REST backend."""

    def __init__(self, client: ForumHttpClient) -> None:
        self.client = client

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        body = await self.client.get(
            f"/questions/{question_id}/answers", "fetch answers"
        )
        answers = [payload_to_answer(a) for a in body.get("answers") or []]
        return sorted(answers, key=oldest_first)

    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        if not question_ids:
            return {}
        body = await self.client.get(
            "/answers/counts", "count answers", question_ids=_join(question_ids)
        )
        counts = body.get("counts") or {}
        return {QuestionId(qid): int(n) for qid, n in counts.items()}

    async def count_by_author(self, author_id: UserId) -> int:
        body = await self.client.get(
            "/answers/count", "count answers by author", author_id=author_id
        )
        return int(body.get("count") or 0)

    async def save(self, answer: Answer) -> Answer:
        body = await self.client.post(
            f"/questions/{answer.question_id}/answers",
            "create answer",
            answer_to_payload(answer),
        )
        return payload_to_answer(body.get("answer") or answer_to_payload(answer))


class HttpCommentRepository(CommentRepository):
    """CommentRepository over the REST backend."""

    def __init__(self, client: ForumHttpClient) -> None:
        self.client = client

    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> list[Comment]:
        if not target_ids:
            return []
        body = await self.client.get(
            "/comments",
            "fetch comments",
            target_type=target_type.value,
            target_ids=_join(target_ids),
        )
        comments = [payload_to_comment(c) for c in body.get("comments") or []]
        return sorted(comments, key=oldest_first)

    async def count_by_author(self, author_id: UserId) -> int:
        body = await self.client.get(
            "/comments/count", "count comments by author", author_id=author_id
        )
        return int(body.get("count") or 0)

    async def save(self, comment: Comment) -> Comment:
        body = await self.client.post(
            "/comments", "create comment", comment_to_payload(comment)
        )
        return payload_to_comment(body.get("comment") or comment_to_payload(comment))


class HttpTagRepository(TagRepository):
    """TagRepository over the REST backend."""

    def __init__(self, client: ForumHttpClient) -> None:
        self.client = client

    async def find_all(self) -> list[Tag]:
        body = await self.client.get("/tags", "fetch tags")
        tags = [payload_to_tag(t) for t in body.get("tags") or []]
        return sorted(tags, key=lambda t: t.name.normalized)

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        # The tag list is small; filter client-side ignoring case
        tags = await self.find_all()
        return [tag for name in names for tag in tags if tag.name.matches(name)]

    async def save(self, tag: Tag) -> Tag:
        body = await self.client.post("/tags", "create tag", tag_to_payload(tag))
        return payload_to_tag(body.get("tag") or tag_to_payload(tag))


class HttpVoteRepository(VoteRepository):
    """VoteRepository over the REST backend.

    The backend applies each transition as a single conditional write on
    (user, target) and answers 409 when ``expected`` no longer holds.
    """

    def __init__(self, client: ForumHttpClient) -> None:
        self.client = client

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: TargetId,
    ) -> Optional[Vote]:
        try:
            body = await self.client.get(
                f"/votes/{target_type.value}/{target_id}/users/{user_id}",
                "fetch vote",
            )
        except NotFoundError:
            return None
        return payload_to_vote(body["vote"]) if body.get("vote") else None

    async def find_by_targets(
        self,
        target_type: TargetType,
        target_ids: Sequence[TargetId],
    ) -> list[Vote]:
        if not target_ids:
            return []
        body = await self.client.get(
            f"/votes/{target_type.value}",
            "fetch votes",
            target_ids=_join(target_ids),
        )
        return [payload_to_vote(v) for v in body.get("votes") or []]

    async def apply(self, transition: VoteTransition) -> None:
        key = transition.key
        try:
            await self.client.put(
                f"/votes/{key.target_type.value}/{key.target_id}/users/{key.user_id}",
                "submit vote",
                transition_to_payload(transition),
                conflict_aware=True,
            )
        except BackendConflictError as e:
            logfire.warn("Backend reported vote conflict", error=str(e))
            raise VoteConflictError(key.target_type.value, key.target_id) from e
