"""
Domain exceptions raised by services.
Mapped to HTTP responses by config.exceptions.custom_exception_handler.
"""


class DomainError(Exception):
    """Base exception for business rule violations."""

    default_message = 'Request failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Unknown id, or an id that belongs to another organization."""

    default_message = 'Not found'


class ValidationError(DomainError):
    """
    Malformed input. errors is field-keyed: {"blockLengthMinutes": ["..."]}.
    """

    default_message = 'Validation failed'

    def __init__(self, errors=None, message=None):
        self.errors = {k: list(v) if isinstance(v, (list, tuple)) else [v] for k, v in (errors or {}).items()}
        super().__init__(message)

    @classmethod
    def for_field(cls, field, message):
        return cls({field: [message]})


class UnprocessableEntity(DomainError):
    """Valid request that conflicts with current state (e.g. slot already claimed)."""

    default_message = 'Request cannot be processed in the current state'


class ForbiddenError(DomainError):
    """Authenticated, but the role does not allow the action."""

    default_message = 'Forbidden'
