"""Mappers between backend JSON payloads and domain models.

Backends embed relations inconsistently: ``author_id`` may be a bare id or
a full profile object, tags may arrive as ``tag_ids`` or as embedded
``{"_id", "name"}`` objects. Field spellings (``_id``/``id``,
``created_at``/``createdAt``) are handled by the model aliases.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ask.adapter.error import PayloadError
from ask.domain.model import Answer, Comment, Question, Tag, Vote
from ask.domain.model.vote import VoteTransition

M = TypeVar("M", bound=BaseModel)


def _ref_id(value: Any) -> Optional[str]:
    """Id of an embedded object, or the value itself for bare references."""
    if isinstance(value, dict):
        ref = value.get("_id") or value.get("id")
        return str(ref) if ref is not None else None
    return str(value) if value is not None else None


def _split_author(data: Dict[str, Any]) -> Dict[str, Any]:
    """Separate an embedded author profile from the author reference."""
    author = data.get("author_id")
    if isinstance(author, dict):
        data["author"] = author
        data["author_id"] = _ref_id(author)
    return data


def _validate(model: Type[M], data: Dict[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise PayloadError(f"Malformed {model.__name__} payload: {e}") from e


def payload_to_question(payload: Dict[str, Any]) -> Question:
    """Convert a backend question payload to a Question.

    Args:
        payload: Question JSON object

    Returns:
        Question domain model
    """
    data = _split_author(dict(payload))

    tags = data.pop("tags", None)
    if "tag_ids" not in data and tags:
        data["tag_ids"] = [ref for ref in (_ref_id(t) for t in tags) if ref]

    if data.get("views") is None:
        data["views"] = 0

    return _validate(Question, data)


def payload_to_answer(payload: Dict[str, Any]) -> Answer:
    """Convert a backend answer payload to an Answer."""
    data = _split_author(dict(payload))
    data["question_id"] = _ref_id(data.get("question_id"))
    return _validate(Answer, data)


def payload_to_comment(payload: Dict[str, Any]) -> Comment:
    """Convert a backend comment payload to a Comment."""
    data = _split_author(dict(payload))
    for field in ("question_id", "answer_id"):
        if data.get(field) is not None:
            data[field] = _ref_id(data[field])
    return _validate(Comment, data)


def payload_to_tag(payload: Dict[str, Any]) -> Tag:
    """Convert a backend tag payload to a Tag."""
    return _validate(Tag, dict(payload))


def payload_to_vote(payload: Dict[str, Any]) -> Vote:
    """Convert a backend vote payload to a Vote."""
    data = dict(payload)
    data["user_id"] = _ref_id(data.get("user_id"))
    return _validate(Vote, data)


def question_to_payload(question: Question) -> Dict[str, Any]:
    """Question fields sent when creating a question."""
    return question.model_dump(mode="json", exclude={"author", "views"})


def answer_to_payload(answer: Answer) -> Dict[str, Any]:
    """Answer fields sent when creating an answer."""
    return answer.model_dump(mode="json", exclude={"author"})


def comment_to_payload(comment: Comment) -> Dict[str, Any]:
    """Comment fields sent when creating a comment."""
    return comment.model_dump(mode="json", exclude={"author"}, exclude_none=True)


def tag_to_payload(tag: Tag) -> Dict[str, Any]:
    """Tag fields sent when creating a tag."""
    return tag.model_dump(mode="json")


def transition_to_payload(transition: VoteTransition) -> Dict[str, Any]:
    """Body of the atomic vote write."""
    return {
        "action": transition.action.value,
        "vote_type": transition.submitted.value,
        "expected": transition.previous.value if transition.previous else None,
        "vote": transition.vote.model_dump(mode="json") if transition.vote else None,
    }
