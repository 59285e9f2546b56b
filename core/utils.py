"""
Core utilities - organization scoping, request parsing.
"""
import uuid

from core.exceptions import ValidationError


def organization_id_for(user):
    """Tenant id of the authenticated member. Every staff query is filtered by it."""
    return getattr(user, 'organization_id', None)


def parse_uuid_param(value, field):
    """Parse a UUID query/body parameter; field-keyed ValidationError when malformed."""
    if value in (None, ''):
        raise ValidationError.for_field(field, f'{field} is required')
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError.for_field(field, f'{field} must be a valid id')


def parse_int_param(value, field):
    if value in (None, ''):
        raise ValidationError.for_field(field, f'{field} is required')
    try:
        return int(value)
    except (ValueError, TypeError):
        raise ValidationError.for_field(field, f'{field} must be a valid id')
