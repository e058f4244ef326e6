"""Ticketing for overlapping fetches."""


class FetchSequencer:
    """Hands out increasing tickets; only the newest ticket is current.

    A view issues a ticket before each fetch and applies the result only if
    the ticket is still current when the fetch completes, so a slow response
    can never overwrite a newer one.
    """

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest
