"""Vote use cases."""

from .submit_vote import SubmitVoteRequest, SubmitVoteResponse, SubmitVoteUseCase

__all__ = ["SubmitVoteRequest", "SubmitVoteResponse", "SubmitVoteUseCase"]
