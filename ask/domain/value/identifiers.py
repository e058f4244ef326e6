"""Strongly typed identifiers for forum entities.

Backends hand out opaque string ids (UUIDs or document ids), so every
identifier wraps ``str``.
"""

from typing import NewType

UserId = NewType("UserId", str)
QuestionId = NewType("QuestionId", str)
AnswerId = NewType("AnswerId", str)
CommentId = NewType("CommentId", str)
VoteId = NewType("VoteId", str)
TagId = NewType("TagId", str)

# Either a QuestionId or an AnswerId, discriminated by TargetType
TargetId = NewType("TargetId", str)
