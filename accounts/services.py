"""
Member services: tenant-scoped CRUD and the sign-up upsert.
"""
import logging

from django.db import IntegrityError, transaction
from django.db.models import Q

from accounts.models import Member, normalize_member_email
from core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

VALID_ROLES = {choice for choice, _ in Member.ROLE_CHOICES}


def _parse_role(role):
    value = (role or '').strip()
    for valid in VALID_ROLES:
        if value.lower() == valid.lower():
            return valid
    raise ValidationError.for_field('role', 'Invalid role')


def _email_taken(organization_id, email, exclude_id=None):
    qs = Member.objects.for_organization(organization_id).filter(email__iexact=email)
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    return qs.exists()


def list_members(organization_id, search=None):
    qs = Member.objects.for_organization(organization_id)
    term = (search or '').strip()
    if term:
        qs = qs.filter(
            Q(first_name__icontains=term) |
            Q(last_name__icontains=term) |
            Q(email__icontains=term)
        )
    return list(qs.order_by('last_name', 'first_name'))


def get_member(member_id, organization_id):
    member = Member.objects.for_organization(organization_id).filter(id=member_id).first()
    if member is None:
        raise NotFoundError('Member not found')
    return member


def create_member(organization_id, *, first_name, last_name, email, role, password=None):
    role = _parse_role(role)
    email = normalize_member_email(email)
    if _email_taken(organization_id, email):
        raise ValidationError.for_field('email', 'Email already in use')
    try:
        with transaction.atomic():
            member = Member.objects.create_user(
                email=email,
                password=password,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                role=role,
                is_active=True,
                organization_id=organization_id,
            )
    except IntegrityError:
        # Same email inserted concurrently
        raise ValidationError.for_field('email', 'Email already in use')
    logger.info('Member created: id=%s org=%s role=%s', member.id, organization_id, role)
    return member


def update_member(member_id, organization_id, *, first_name, last_name, email, role, is_active,
                  notifications_enabled=None):
    member = get_member(member_id, organization_id)
    role = _parse_role(role)
    email = normalize_member_email(email)
    if _email_taken(organization_id, email, exclude_id=member.id):
        raise ValidationError.for_field('email', 'Email already in use')

    member.first_name = first_name.strip()
    member.last_name = last_name.strip()
    member.email = email
    member.role = role
    member.is_active = is_active
    if notifications_enabled is not None:
        member.notifications_enabled = notifications_enabled
    try:
        with transaction.atomic():
            member.save()
    except IntegrityError:
        raise ValidationError.for_field('email', 'Email already in use')
    return member


def deactivate_member(member_id, organization_id):
    member = get_member(member_id, organization_id)
    member.is_active = False
    member.save(update_fields=['is_active', 'updated_at'])
    logger.info('Member deactivated: id=%s org=%s', member.id, organization_id)
    return member


def resolve_signup_member(organization_id, first_name, last_name, email):
    """
    Find the organization's member by trimmed, case-insensitive email, or
    create one (role=Member, active). Repeated sign-ups reuse the same member.
    """
    email = normalize_member_email(email)
    if not email:
        raise ValidationError.for_field('email', 'Email is required')

    existing = Member.objects.for_organization(organization_id).filter(email__iexact=email).first()
    if existing is not None:
        return existing

    try:
        with transaction.atomic():
            member = Member.objects.create_user(
                email=email,
                first_name=(first_name or '').strip(),
                last_name=(last_name or '').strip(),
                role=Member.ROLE_MEMBER,
                is_active=True,
                organization_id=organization_id,
            )
    except IntegrityError:
        # Concurrent sign-up with the same email created it first
        member = Member.objects.for_organization(organization_id).get(email__iexact=email)
        return member

    logger.info('Member created by audition sign-up: id=%s org=%s', member.id, organization_id)
    return member
