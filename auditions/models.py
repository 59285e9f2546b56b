"""
Audition schedule: one AuditionDate per session, partitioned into fixed-length
AuditionSlots at creation time. Ids are UUIDs since they appear in public
sign-up links.

A slot is available iff member is null AND status is Pending.
"""
import uuid

from django.db import models


class AuditionDate(models.Model):
    """
    One audition session of a program year.
    start_time < end_time and (end - start) divisible by block_length_minutes
    (enforced in auditions.services).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        'core.Organization',
        on_delete=models.CASCADE,
        related_name='audition_dates',
        db_column='organization_id',
    )
    program_year = models.ForeignKey(
        'program_years.ProgramYear',
        on_delete=models.CASCADE,
        related_name='audition_dates',
    )
    date = models.DateField(db_index=True)
    start_time = models.TimeField()
    end_time = models.TimeField()
    block_length_minutes = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'audition_dates'
        verbose_name = 'Audition Date'
        verbose_name_plural = 'Audition Dates'
        ordering = ['date', 'start_time']
        indexes = [
            models.Index(fields=['organization', 'program_year'], name='audition_dates_org_year_idx'),
        ]

    def __str__(self):
        return f"{self.date} {self.start_time:%H:%M}-{self.end_time:%H:%M}"


class AuditionSlot(models.Model):
    """
    One bookable block. member is set exactly once by public sign-up;
    status/notes are edited by staff afterwards.
    """
    STATUS_PENDING = 'Pending'
    STATUS_ACCEPTED = 'Accepted'
    STATUS_REJECTED = 'Rejected'
    STATUS_WAITLISTED = 'Waitlisted'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_ACCEPTED, 'Accepted'),
        (STATUS_REJECTED, 'Rejected'),
        (STATUS_WAITLISTED, 'Waitlisted'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # PROTECT: a date can only be removed after its slots (auditions.store.delete_date_with_slots)
    audition_date = models.ForeignKey(
        AuditionDate,
        on_delete=models.PROTECT,
        related_name='slots',
    )
    organization = models.ForeignKey(
        'core.Organization',
        on_delete=models.CASCADE,
        related_name='audition_slots',
        db_column='organization_id',
    )
    slot_time = models.TimeField()
    member = models.ForeignKey(
        'accounts.Member',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='audition_slots',
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    notes = models.TextField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'audition_slots'
        verbose_name = 'Audition Slot'
        verbose_name_plural = 'Audition Slots'
        ordering = ['slot_time']
        constraints = [
            models.UniqueConstraint(
                fields=['audition_date', 'slot_time'],
                name='unique_audition_slot_time',
            ),
        ]

    def __str__(self):
        return f"{self.audition_date_id} {self.slot_time:%H:%M} ({self.status})"

    @property
    def is_available(self):
        return self.member_id is None and self.status == self.STATUS_PENDING
