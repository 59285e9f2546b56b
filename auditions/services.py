"""
Audition services: scheduling (staff), public sign-up, slot review (staff).

Services raise core.exceptions errors; config.exceptions maps them to HTTP.
"""
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from django.db import transaction

from accounts.services import resolve_signup_member
from auditions import store
from auditions.models import AuditionSlot
from auditions.slots import partition_slot_times, window_minutes
from core.exceptions import NotFoundError, UnprocessableEntity, ValidationError
from program_years.models import ProgramYear

logger = logging.getLogger(__name__)

VALID_STATUSES = {value for value, _ in AuditionSlot.STATUS_CHOICES}


# Scheduling

def _validate_window(day, start_time, end_time, block_length_minutes):
    if block_length_minutes is None or block_length_minutes <= 0:
        raise ValidationError.for_field('blockLengthMinutes', 'Block length must be a positive number')
    if start_time >= end_time:
        raise ValidationError.for_field('startTime', 'Start time must be before end time')
    if window_minutes(day, start_time, end_time) % block_length_minutes != 0:
        raise ValidationError.for_field(
            'blockLengthMinutes', 'Block length must evenly divide the total duration'
        )


def create_audition_date(organization_id, *, program_year_id, date, start_time, end_time,
                         block_length_minutes):
    """
    Create the date and its Pending slots atomically.
    Nothing is written when validation fails.
    """
    _validate_window(date, start_time, end_time, block_length_minutes)

    if not ProgramYear.objects.filter(id=program_year_id, organization_id=organization_id).exists():
        raise ValidationError.for_field('programYearId', 'Program year not found')

    slot_times = partition_slot_times(date, start_time, end_time, block_length_minutes)
    audition_date = store.create_date_with_slots(
        organization_id=organization_id,
        program_year_id=program_year_id,
        date=date,
        start_time=start_time,
        end_time=end_time,
        block_length_minutes=block_length_minutes,
        slot_times=slot_times,
    )
    logger.info(
        'Audition date created: id=%s org=%s date=%s slots=%d',
        audition_date.id, organization_id, date, len(slot_times),
    )
    return audition_date


def get_audition_date(audition_date_id, organization_id):
    audition_date = store.get_date(audition_date_id, organization_id)
    if audition_date is None:
        raise NotFoundError('Audition date not found')
    return audition_date


def list_audition_dates(program_year_id, organization_id):
    return store.list_dates(organization_id, program_year_id)


def delete_audition_date(audition_date_id, organization_id):
    audition_date = get_audition_date(audition_date_id, organization_id)
    deleted_slots = store.delete_date_with_slots(audition_date)
    logger.info(
        'Audition date deleted: id=%s org=%s slots=%d',
        audition_date_id, organization_id, deleted_slots,
    )


# Public sign-up

def get_public_audition_date(audition_date_id):
    """No tenant filter: the caller has no session."""
    audition_date = store.find_date(audition_date_id)
    if audition_date is None:
        raise NotFoundError('Audition date not found')
    return audition_date


def _ensure_claimable(slot):
    if slot.status != AuditionSlot.STATUS_PENDING:
        raise UnprocessableEntity('This audition slot is no longer available')
    if slot.member_id is not None:
        raise UnprocessableEntity('This audition slot has already been claimed')


NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 200


def _clean_signup_email(email):
    email = (email or '').strip()
    if not email:
        raise ValidationError.for_field('email', 'Email is required')
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError.for_field('email', f'Ensure this field has no more than {EMAIL_MAX_LENGTH} characters.')
    try:
        validate_email(email)
    except DjangoValidationError:
        raise ValidationError.for_field('email', 'Enter a valid email address')
    return email


def _clean_signup_names(first_name, last_name):
    first_name = (first_name or '').strip()
    last_name = (last_name or '').strip()
    errors = {}
    for field, value in (('firstName', first_name), ('lastName', last_name)):
        if len(value) > NAME_MAX_LENGTH:
            errors[field] = f'Ensure this field has no more than {NAME_MAX_LENGTH} characters.'
    if errors:
        raise ValidationError(errors)
    return first_name, last_name


def sign_up(slot_id, first_name, last_name, email):
    """
    Claim an open slot for the signer. The member is looked up (or created)
    in the slot's organization. Exactly one concurrent caller wins the slot;
    the rest get UnprocessableEntity.
    """
    slot = store.find_slot(slot_id)
    if slot is None:
        raise NotFoundError('Audition slot not found')
    _ensure_claimable(slot)
    email = _clean_signup_email(email)
    first_name, last_name = _clean_signup_names(first_name, last_name)

    with transaction.atomic():
        member = resolve_signup_member(slot.organization_id, first_name, last_name, email)
        if not store.claim_slot(slot.id, member.id):
            logger.warning('Audition slot claim lost: slot=%s member=%s', slot.id, member.id)
            try:
                slot.refresh_from_db()
            except AuditionSlot.DoesNotExist:
                raise NotFoundError('Audition slot not found')
            _ensure_claimable(slot)
            raise UnprocessableEntity('This audition slot has already been claimed')

    slot.refresh_from_db()
    logger.info('Audition slot claimed: slot=%s member=%s org=%s', slot.id, member.id, slot.organization_id)
    return slot


# Staff review

def _get_slot(slot_id, organization_id, audition_date_id=None):
    slot = store.get_slot(slot_id, organization_id)
    if slot is None or (audition_date_id is not None and slot.audition_date_id != audition_date_id):
        raise NotFoundError('Audition slot not found')
    return slot


def parse_status(value):
    """Case-insensitive match against Pending/Accepted/Rejected/Waitlisted."""
    text = str(value or '').strip().lower()
    for status in VALID_STATUSES:
        if status.lower() == text:
            return status
    raise ValidationError.for_field('status', 'Invalid status value')


def list_slots(audition_date_id, organization_id):
    get_audition_date(audition_date_id, organization_id)
    return store.list_slots(audition_date_id, organization_id)


def update_slot_status(slot_id, organization_id, status, audition_date_id=None):
    """Any status may move to any other, including back to Pending. Claimant is untouched."""
    slot = _get_slot(slot_id, organization_id, audition_date_id)
    new_status = parse_status(status)
    old_status = slot.status
    slot.status = new_status
    store.save_slot(slot, ['status'])
    logger.info('Audition slot status: slot=%s %s -> %s', slot.id, old_status, new_status)
    return slot


def update_slot_notes(slot_id, organization_id, notes, audition_date_id=None):
    slot = _get_slot(slot_id, organization_id, audition_date_id)
    slot.notes = notes
    store.save_slot(slot, ['notes'])
    return slot
