"""
Notification services: audition announcement recipients and delivery.
Mail goes out through Django's configured EMAIL_BACKEND.
"""
import logging

from django.conf import settings
from django.core.mail import send_mail

from accounts.models import Member
from auditions import store as audition_store
from core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def get_audition_recipients(audition_date_id, organization_id):
    """
    Active members of the organization who have notifications enabled.
    Raises NotFoundError if the audition date is not in the organization.
    """
    if audition_store.get_date(audition_date_id, organization_id) is None:
        raise NotFoundError('Audition date not found')
    return list(
        Member.objects.for_organization(organization_id)
        .filter(is_active=True, notifications_enabled=True)
        .order_by('last_name', 'first_name')
    )


def send_audition_announcement(audition_date_id, organization_id, subject, body):
    """Send one email per recipient. Returns the number of messages sent."""
    recipients = get_audition_recipients(audition_date_id, organization_id)
    sent = 0
    for member in recipients:
        sent += send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [member.email],
            fail_silently=False,
        )
    logger.info(
        'Audition announcement sent: date=%s org=%s recipients=%s',
        audition_date_id, organization_id, sent,
    )
    return sent
