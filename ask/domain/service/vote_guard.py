"""In-flight guard for vote submissions."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire

from ask.domain.error import VoteInFlightError
from ask.domain.model.vote import VoteKey


class VoteGuard:
    """Tracks (user, target) keys with a vote submission in progress.

    One guard is shared by every VoteService for the life of the
    application. Claiming is check-and-set with no await in between, so on
    a single event loop two submissions can never hold the same key.
    """

    def __init__(self) -> None:
        self._in_flight: set[VoteKey] = set()

    def is_in_flight(self, key: VoteKey) -> bool:
        """Whether a submission for the key is still running."""
        return key in self._in_flight

    @asynccontextmanager
    async def claim(self, key: VoteKey) -> AsyncIterator[VoteKey]:
        """Hold the key for the duration of the block.

        Raises:
            VoteInFlightError: If the key is already held
        """
        if key in self._in_flight:
            logfire.warn(
                "Vote submission rejected while another is in flight",
                user_id=key.user_id,
                target_type=key.target_type.value,
                target_id=key.target_id,
            )
            raise VoteInFlightError(key.target_type.value, key.target_id)

        self._in_flight.add(key)
        try:
            yield key
        finally:
            self._in_flight.discard(key)
