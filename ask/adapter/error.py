"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class BackendConflictError(AdapterError):
    """The backend refused a write because the stored state changed."""

    pass


class PayloadError(AdapterError):
    """The backend answered with a payload we cannot read."""

    pass
