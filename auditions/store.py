"""
Audition schedule data access.

Staff paths always pass the organization id; the find_* lookups are unscoped
and exist only for the public (no session) sign-up paths.
"""
from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone

from auditions.models import AuditionDate, AuditionSlot


def _dates_with_slots():
    return AuditionDate.objects.prefetch_related(
        Prefetch('slots', queryset=AuditionSlot.objects.order_by('slot_time'))
    )


def get_date(audition_date_id, organization_id):
    """Date (slots prefetched, ordered by time) or None."""
    return _dates_with_slots().filter(id=audition_date_id, organization_id=organization_id).first()


def list_dates(organization_id, program_year_id):
    return list(
        _dates_with_slots()
        .filter(organization_id=organization_id, program_year_id=program_year_id)
        .order_by('date', 'start_time')
    )


def create_date_with_slots(*, organization_id, program_year_id, date, start_time, end_time,
                           block_length_minutes, slot_times):
    """
    Insert the date and all of its Pending slots in one transaction, so no
    reader sees a date without its full slot set.
    """
    with transaction.atomic():
        audition_date = AuditionDate.objects.create(
            organization_id=organization_id,
            program_year_id=program_year_id,
            date=date,
            start_time=start_time,
            end_time=end_time,
            block_length_minutes=block_length_minutes,
        )
        AuditionSlot.objects.bulk_create([
            AuditionSlot(
                audition_date=audition_date,
                organization_id=organization_id,
                slot_time=slot_time,
                status=AuditionSlot.STATUS_PENDING,
            )
            for slot_time in slot_times
        ])
    return get_date(audition_date.id, organization_id)


def delete_date_with_slots(audition_date):
    """Child slots first, then the date."""
    with transaction.atomic():
        deleted_slots, _ = AuditionSlot.objects.filter(
            audition_date_id=audition_date.id,
            organization_id=audition_date.organization_id,
        ).delete()
        audition_date.delete()
    return deleted_slots


def get_slot(slot_id, organization_id):
    return AuditionSlot.objects.filter(id=slot_id, organization_id=organization_id).first()


def list_slots(audition_date_id, organization_id):
    return list(
        AuditionSlot.objects.filter(
            audition_date_id=audition_date_id,
            organization_id=organization_id,
        ).order_by('slot_time')
    )


def save_slot(slot, fields):
    slot.save(update_fields=list(fields) + ['updated_at'])
    return slot


# Unscoped lookups: public sign-up only

def find_date(audition_date_id):
    return _dates_with_slots().filter(id=audition_date_id).first()


def find_slot(slot_id):
    return AuditionSlot.objects.filter(id=slot_id).first()


def claim_slot(slot_id, member_id):
    """
    Compare-and-set: assign member only while the slot is still Pending and
    unclaimed. Returns True if this call won the slot.
    """
    updated = AuditionSlot.objects.filter(
        id=slot_id,
        member__isnull=True,
        status=AuditionSlot.STATUS_PENDING,
    ).update(member_id=member_id, updated_at=timezone.now())
    return updated == 1
