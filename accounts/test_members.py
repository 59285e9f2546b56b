"""
Member management API tests (Admin).
"""
from unittest import mock

from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Member
from core.models import Organization


class MemberManagementTests(TestCase):
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
        token = str(AccessToken.for_user(self.admin))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def _create(self, **overrides):
        body = {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "Jane@X.com",
            "role": "member",
        }
        body.update(overrides)
        return self.client.post("/api/members", body, format="json")

    def test_create_member(self):
        res = self._create()
        self.assertEqual(res.status_code, 201)
        data = res.json()
        self.assertEqual(data["email"], "jane@x.com")
        self.assertEqual(data["role"], "Member")
        self.assertTrue(data["isActive"])
        self.assertTrue(data["notificationsEnabled"])
        self.assertEqual(Member.objects.get(id=data["id"]).organization_id, self.org.id)

    def test_duplicate_email_in_organization_rejected(self):
        self.assertEqual(self._create().status_code, 201)
        res = self._create(email=" JANE@x.com")
        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.json()["errors"])

    def test_concurrent_duplicate_email_returns_400(self):
        self.assertEqual(self._create().status_code, 201)
        with mock.patch("accounts.services._email_taken", return_value=False):
            res = self._create(email="jane@x.com")
        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.json()["errors"])
        self.assertEqual(Member.objects.filter(email="jane@x.com").count(), 1)

    def test_invalid_role_rejected(self):
        res = self._create(role="Conductor")
        self.assertEqual(res.status_code, 400)
        self.assertIn("role", res.json()["errors"])

    def test_search(self):
        self._create()
        self._create(firstName="Bob", lastName="Smith", email="bob@x.com")
        res = self.client.get("/api/members?search=smi")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([m["email"] for m in res.json()], ["bob@x.com"])

    def test_update_member(self):
        member_id = self._create().json()["id"]
        res = self.client.put(
            f"/api/members/{member_id}",
            {
                "firstName": "Janet",
                "lastName": "Doe",
                "email": "janet@x.com",
                "role": "Admin",
                "isActive": True,
                "notificationsEnabled": False,
            },
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertEqual(data["firstName"], "Janet")
        self.assertEqual(data["role"], "Admin")
        self.assertFalse(data["notificationsEnabled"])

    def test_update_to_taken_email_rejected(self):
        member_id = self._create().json()["id"]
        res = self.client.put(
            f"/api/members/{member_id}",
            {"firstName": "Jane", "lastName": "Doe", "email": "admin@test.com", "role": "Member"},
            format="json",
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("email", res.json()["errors"])

    def test_deactivate(self):
        member_id = self._create().json()["id"]
        res = self.client.post(f"/api/members/{member_id}/deactivate")
        self.assertEqual(res.status_code, 200)
        self.assertFalse(res.json()["isActive"])
        self.assertFalse(Member.objects.get(id=member_id).is_active)

    def test_unknown_member_returns_404(self):
        res = self.client.get("/api/members/999999")
        self.assertEqual(res.status_code, 404)
