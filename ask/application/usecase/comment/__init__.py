"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)

__all__ = ["CreateCommentRequest", "CreateCommentResponse", "CreateCommentUseCase"]
