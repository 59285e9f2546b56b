"""
Audition API tests (staff + public):
- create 09:00-11:00 / 15 -> 201 with 8 slots
- public sign-up -> slot unavailable on next public GET, others still open
- repeat sign-up -> 422 with message
- status Accepted on an unclaimed slot -> unavailable
- block 20 over 50 minutes -> 400 keyed under blockLengthMinutes
- anonymous staff call -> 401, member token -> 403, other org -> 404
"""
import uuid
from datetime import date

from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Member
from auditions.models import AuditionDate, AuditionSlot
from core.models import Organization
from program_years.models import ProgramYear


class AuditionApiTestBase(TestCase):
    def setUp(self):
        self.org = Organization.objects.create(name="Test Choir", slug="test-choir")
        self.client = APIClient()
        self.admin = Member.objects.create_user(
            email="admin@test.com",
            password="pass1234",
            first_name="Ada",
            last_name="Admin",
            role=Member.ROLE_ADMIN,
            organization=self.org,
        )
        self.member = Member.objects.create_user(
            email="member@test.com",
            password="pass1234",
            first_name="Mo",
            last_name="Member",
            role=Member.ROLE_MEMBER,
            organization=self.org,
        )
        self.year = ProgramYear.objects.create(
            organization=self.org,
            name="2026",
            start_date=date(2026, 1, 1),
            end_date=date(2027, 1, 1),
        )

    def _auth_header(self, user: Member) -> dict:
        token = str(AccessToken.for_user(user))
        return {"HTTP_AUTHORIZATION": f"Bearer {token}"}

    def _as(self, user):
        self.client.credentials(**self._auth_header(user))

    def _create_date(self, start="09:00", end="11:00", block=15):
        self._as(self.admin)
        return self.client.post(
            "/api/audition-dates",
            {
                "programYearId": self.year.id,
                "date": "2026-04-11",
                "startTime": start,
                "endTime": end,
                "blockLengthMinutes": block,
            },
            format="json",
        )

    def _public_get(self, audition_date_id):
        self.client.credentials()
        return self.client.get(f"/api/public/auditions/{audition_date_id}")

    def _signup(self, slot_id, email="jane@x.com", first="Jane", last="Doe"):
        self.client.credentials()
        return self.client.post(
            f"/api/public/auditions/{slot_id}/signup",
            {"firstName": first, "lastName": last, "email": email},
            format="json",
        )


class AuditionWorkflowTests(AuditionApiTestBase):
    def test_create_date_returns_slots(self):
        res = self._create_date()
        self.assertEqual(res.status_code, 201)
        data = res.json()
        self.assertEqual(data["date"], "2026-04-11")
        self.assertEqual(data["startTime"], "09:00:00")
        self.assertEqual(data["endTime"], "11:00:00")
        self.assertEqual(data["blockLengthMinutes"], 15)
        self.assertEqual(data["programYearId"], self.year.id)
        self.assertEqual(
            [s["slotTime"] for s in data["slots"]],
            ["09:00:00", "09:15:00", "09:30:00", "09:45:00",
             "10:00:00", "10:15:00", "10:30:00", "10:45:00"],
        )
        for slot in data["slots"]:
            self.assertEqual(slot["status"], "Pending")
            self.assertIsNone(slot["memberId"])
            self.assertIsNone(slot["notes"])
            self.assertEqual(slot["auditionDateId"], data["id"])

    def test_signup_then_public_get_shows_slot_taken(self):
        data = self._create_date().json()
        first_slot = data["slots"][0]["id"]

        res = self._signup(first_slot)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["id"], first_slot)
        member = Member.objects.get(email="jane@x.com", organization=self.org)
        self.assertEqual(res.json()["memberId"], member.id)

        public = self._public_get(data["id"]).json()
        availability = [s["isAvailable"] for s in public["slots"]]
        self.assertEqual(availability, [False] + [True] * 7)

    def test_repeat_signup_returns_422_with_message(self):
        data = self._create_date().json()
        first_slot = data["slots"][0]["id"]
        self.assertEqual(self._signup(first_slot).status_code, 200)

        res = self._signup(first_slot)
        self.assertEqual(res.status_code, 422)
        self.assertIn("message", res.json())

    def test_accepting_unclaimed_slot_makes_it_unavailable(self):
        data = self._create_date().json()
        slot_id = data["slots"][3]["id"]

        self._as(self.admin)
        res = self.client.put(f"/api/audition-slots/{slot_id}/status", {"status": "Accepted"}, format="json")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["status"], "Accepted")
        self.assertIsNone(res.json()["memberId"])

        public = self._public_get(data["id"]).json()
        self.assertFalse(public["slots"][3]["isAvailable"])
        self.assertEqual(sum(1 for s in public["slots"] if s["isAvailable"]), 7)

    def test_non_divisible_block_returns_400(self):
        res = self._create_date(start="09:00", end="09:50", block=20)
        self.assertEqual(res.status_code, 400)
        self.assertIn("blockLengthMinutes", res.json()["errors"])
        self.assertEqual(AuditionDate.objects.count(), 0)

    def test_start_after_end_returns_400(self):
        res = self._create_date(start="11:00", end="09:00", block=15)
        self.assertEqual(res.status_code, 400)
        self.assertIn("startTime", res.json()["errors"])

    def test_unknown_program_year_returns_400(self):
        self._as(self.admin)
        res = self.client.post(
            "/api/audition-dates",
            {
                "programYearId": self.year.id + 999,
                "date": "2026-04-11",
                "startTime": "09:00",
                "endTime": "10:00",
                "blockLengthMinutes": 30,
            },
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("programYearId", res.json()["errors"])


class AuditionStaffEndpointTests(AuditionApiTestBase):
    def setUp(self):
        super().setUp()
        self.date_data = self._create_date().json()
        self.date_id = self.date_data["id"]
        self.slot_id = self.date_data["slots"][0]["id"]

    def test_list_dates_by_program_year(self):
        self._as(self.admin)
        res = self.client.get(f"/api/audition-dates?programYearId={self.year.id}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([d["id"] for d in res.json()], [self.date_id])
        self.assertEqual(len(res.json()[0]["slots"]), 8)

    def test_list_dates_requires_program_year(self):
        self._as(self.admin)
        res = self.client.get("/api/audition-dates")
        self.assertEqual(res.status_code, 400)
        self.assertIn("programYearId", res.json()["errors"])

    def test_get_and_delete_date(self):
        self._as(self.admin)
        res = self.client.get(f"/api/audition-dates/{self.date_id}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(len(res.json()["slots"]), 8)

        res = self.client.delete(f"/api/audition-dates/{self.date_id}")
        self.assertEqual(res.status_code, 204)
        self.assertEqual(AuditionSlot.objects.count(), 0)

        res = self.client.get(f"/api/audition-dates/{self.date_id}")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["code"], "not_found")

    def test_list_slots_for_date(self):
        self._as(self.admin)
        res = self.client.get(f"/api/audition-slots?auditionDateId={self.date_id}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([s["id"] for s in res.json()], [s["id"] for s in self.date_data["slots"]])

        res = self.client.get("/api/audition-slots?auditionDateId=not-a-uuid")
        self.assertEqual(res.status_code, 400)
        self.assertIn("auditionDateId", res.json()["errors"])

    def test_update_notes(self):
        self._as(self.admin)
        res = self.client.put(
            f"/api/audition-slots/{self.slot_id}/notes", {"notes": "Good tone"}, format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["notes"], "Good tone")

        res = self.client.put(f"/api/audition-slots/{self.slot_id}/notes", {"notes": None}, format="json")
        self.assertEqual(res.status_code, 200)
        self.assertIsNone(res.json()["notes"])

    def test_invalid_status_returns_400(self):
        self._as(self.admin)
        res = self.client.put(f"/api/audition-slots/{self.slot_id}/status", {"status": "Maybe"}, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertIn("status", res.json()["errors"])

    def test_nested_slot_routes_check_date(self):
        self._as(self.admin)
        res = self.client.put(
            f"/api/audition-dates/{self.date_id}/slots/{self.slot_id}/status",
            {"status": "Waitlisted"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["status"], "Waitlisted")

        res = self.client.put(
            f"/api/audition-dates/{uuid.uuid4()}/slots/{self.slot_id}/notes",
            {"notes": "x"},
            format="json",
        )
        self.assertEqual(res.status_code, 404)

    def test_unknown_slot_returns_404(self):
        self._as(self.admin)
        res = self.client.put(f"/api/audition-slots/{uuid.uuid4()}/status", {"status": "Accepted"}, format="json")
        self.assertEqual(res.status_code, 404)

    def test_anonymous_staff_request_returns_401(self):
        self.client.credentials()
        res = self.client.get(f"/api/audition-dates/{self.date_id}")
        self.assertEqual(res.status_code, 401)

    def test_member_role_returns_403(self):
        self._as(self.member)
        res = self.client.get(f"/api/audition-dates/{self.date_id}")
        self.assertEqual(res.status_code, 403)
        res = self.client.put(f"/api/audition-slots/{self.slot_id}/status", {"status": "Accepted"}, format="json")
        self.assertEqual(res.status_code, 403)

    def test_other_organization_gets_404(self):
        other_org = Organization.objects.create(name="Other", slug="other")
        other_admin = Member.objects.create_user(
            email="admin@test.com",
            password="pass1234",
            role=Member.ROLE_ADMIN,
            organization=other_org,
        )
        self._as(other_admin)
        self.assertEqual(self.client.get(f"/api/audition-dates/{self.date_id}").status_code, 404)
        self.assertEqual(
            self.client.put(
                f"/api/audition-slots/{self.slot_id}/status", {"status": "Accepted"}, format="json",
            ).status_code,
            404,
        )
        self.assertEqual(self.client.delete(f"/api/audition-dates/{self.date_id}").status_code, 404)


class PublicAuditionTests(AuditionApiTestBase):
    def setUp(self):
        super().setUp()
        self.date_data = self._create_date().json()

    def test_public_projection_hides_member_and_notes(self):
        slot_id = self.date_data["slots"][0]["id"]
        self._signup(slot_id)
        self._as(self.admin)
        self.client.put(f"/api/audition-slots/{slot_id}/notes", {"notes": "private"}, format="json")

        res = self._public_get(self.date_data["id"])
        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertEqual(
            set(data.keys()),
            {"id", "date", "startTime", "endTime", "blockLengthMinutes", "slots"},
        )
        self.assertEqual(set(data["slots"][0].keys()), {"id", "slotTime", "isAvailable"})

    def test_unknown_date_returns_404(self):
        res = self._public_get(uuid.uuid4())
        self.assertEqual(res.status_code, 404)

    def test_public_endpoints_ignore_bad_token(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
        res = self.client.get(f"/api/public/auditions/{self.date_data['id']}")
        self.assertEqual(res.status_code, 200)

    def test_signup_unknown_slot_returns_404(self):
        res = self._signup(uuid.uuid4())
        self.assertEqual(res.status_code, 404)

    def test_signup_invalid_email_returns_400(self):
        slot_id = self.date_data["slots"][0]["id"]
        res = self._signup(slot_id, email="nope")
        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.json()["errors"])

    def test_signup_same_email_two_slots_one_member(self):
        slots = self.date_data["slots"]
        a = self._signup(slots[0]["id"], email="jane@x.com").json()
        b = self._signup(slots[1]["id"], email=" Jane@X.com ").json()
        self.assertEqual(a["memberId"], b["memberId"])

    def test_signup_unknown_slot_with_oversized_fields_returns_404(self):
        self.client.credentials()
        res = self.client.post(
            f"/api/public/auditions/{uuid.uuid4()}/signup",
            {"firstName": "x" * 101, "lastName": "Doe", "email": None},
            format="json",
        )
        self.assertEqual(res.status_code, 404)

    def test_signup_null_email_returns_400_keyed_email(self):
        slot_id = self.date_data["slots"][0]["id"]
        self.client.credentials()
        res = self.client.post(
            f"/api/public/auditions/{slot_id}/signup",
            {"firstName": "Jane", "lastName": "Doe", "email": None},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.json()["errors"])
