"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InvalidTransitionError(BusinessRuleViolationError):
    """Raised when a toggle asks for the state the relationship is already in."""

    def __init__(self, kind: str, target_id: str, present: bool):
        self.kind = kind
        self.target_id = target_id
        self.present = present
        state = "present" if present else "absent"
        super().__init__(f"{kind} on {target_id} is already {state}")


class SelfReferenceRejectedError(BusinessRuleViolationError):
    """Raised when a user targets themselves with a relation that forbids it."""

    def __init__(self, kind: str, user_id: str):
        self.kind = kind
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot apply {kind} to themselves")


class ConcurrentModificationError(DomainError):
    """Raised when an entity was changed by someone else since it was read."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} was modified concurrently")
