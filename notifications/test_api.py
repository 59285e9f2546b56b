"""
Audition announcement tests: recipients are active members with
notifications enabled; one email per recipient.
"""
import uuid
from datetime import date, time

from django.core import mail
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Member
from auditions.services import create_audition_date
from core.models import Organization
from program_years.models import ProgramYear


class AuditionAnnouncementTests(TestCase):
    def setUp(self):
        self.org = Organization.objects.create(name="Test Org", slug="test-org")
        self.client = APIClient()
        self.admin = Member.objects.create_user(
            email="admin@test.com",
            password="pass1234",
            first_name="Ada",
            last_name="Admin",
            role=Member.ROLE_ADMIN,
            organization=self.org,
        )
        Member.objects.create_user(
            email="quiet@test.com", first_name="Quinn", last_name="Quiet",
            organization=self.org, notifications_enabled=False,
        )
        Member.objects.create_user(
            email="gone@test.com", first_name="Gail", last_name="Gone",
            organization=self.org, is_active=False,
        )
        Member.objects.create_user(
            email="sam@test.com", first_name="Sam", last_name="Singer", organization=self.org,
        )
        other = Organization.objects.create(name="Other", slug="other")
        Member.objects.create_user(email="outsider@test.com", organization=other)

        year = ProgramYear.objects.create(
            organization=self.org, name="2026", start_date=date(2026, 1, 1), end_date=date(2027, 1, 1),
        )
        self.audition_date = create_audition_date(
            self.org.id,
            program_year_id=year.id,
            date=date(2026, 4, 11),
            start_time=time(9, 0),
            end_time=time(10, 0),
            block_length_minutes=30,
        )
        token = str(AccessToken.for_user(self.admin))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_recipients(self):
        res = self.client.get(f"/api/notifications/audition-recipients?auditionDateId={self.audition_date.id}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.json(),
            [
                {"memberId": self.admin.id, "name": "Ada Admin", "email": "admin@test.com"},
                {"memberId": Member.objects.get(email="sam@test.com").id, "name": "Sam Singer",
                 "email": "sam@test.com"},
            ],
        )

    def test_unknown_date_returns_404(self):
        res = self.client.get(f"/api/notifications/audition-recipients?auditionDateId={uuid.uuid4()}")
        self.assertEqual(res.status_code, 404)

    def test_announcement_sends_one_email_per_recipient(self):
        res = self.client.post(
            "/api/notifications/audition-announcement",
            {"auditionDateId": str(self.audition_date.id), "subject": "Auditions", "body": "Sign up now"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"sent": 2})
        self.assertEqual(len(mail.outbox), 2)
        self.assertEqual(sorted(m.to[0] for m in mail.outbox), ["admin@test.com", "sam@test.com"])
        self.assertEqual(mail.outbox[0].subject, "Auditions")

    def test_subject_required(self):
        res = self.client.post(
            "/api/notifications/audition-announcement",
            {"auditionDateId": str(self.audition_date.id), "subject": "", "body": "x"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("subject", res.json()["errors"])
        self.assertEqual(len(mail.outbox), 0)
