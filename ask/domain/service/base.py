"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the forum rules that span entities: vote
    transitions, question drafts and the tags they create, answers and
    comments on behalf of a session.
    """

    pass
