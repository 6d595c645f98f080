"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidInputError(ValidationError):
    """Raised when a required argument reaches the domain as None or blank."""

    def __init__(self, message: str):
        super().__init__(message)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class RelationshipConflictError(BusinessRuleViolationError):
    """Raised when an operation would break a user or friendship rule.

    Covers duplicate usernames, self-links, re-linking existing friends,
    unlinking strangers and deleting a user that still has friends.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
