"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input rejected before it reaches the backing store."""

    pass


class AuthRequiredError(DomainError):
    """Raised when a mutation is attempted without a session."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NetworkError(DomainError):
    """Raised when the backing store is unreachable or rejects a request."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteInFlightError(DomainError):
    """Raised when a vote for the same user and target is still being applied."""

    def __init__(self, target_type: str, target_id: str):
        self.target_type = target_type
        self.target_id = target_id
        super().__init__(f"A vote on {target_type} {target_id} is already in flight")


class VoteConflictError(DomainError):
    """Raised when the stored vote no longer matches the planned transition."""

    def __init__(self, target_type: str, target_id: str):
        self.target_type = target_type
        self.target_id = target_id
        super().__init__(f"Vote on {target_type} {target_id} changed concurrently")
