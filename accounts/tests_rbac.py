"""
Minimal RBAC tests: role-based access control.
- Member token hitting admin endpoints returns 403
- Admin token hitting admin endpoints returns 200
- No token returns 401
- Admin of another organization cannot see this organization's members
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Member
from core.models import Organization


class RBACTests(TestCase):
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
        self.member = Member.objects.create_user(
            email="member@test.com",
            password="pass1234",
            first_name="Mo",
            last_name="Member",
            role=Member.ROLE_MEMBER,
            organization=self.org,
        )

        self.other_org = Organization.objects.create(name="Other Org", slug="other-org")
        self.other_admin = Member.objects.create_user(
            email="admin@other.com",
            password="pass1234",
            role=Member.ROLE_ADMIN,
            organization=self.other_org,
        )

    def _auth_header(self, user: Member) -> dict:
        token = str(AccessToken.for_user(user))
        return {"HTTP_AUTHORIZATION": f"Bearer {token}"}

    def test_member_hitting_admin_endpoint_returns_403(self):
        self.client.credentials(**self._auth_header(self.member))
        res = self.client.get("/api/members")
        self.assertEqual(res.status_code, 403)
        self.assertEqual(res.json()["code"], "permission_denied")

    def test_admin_hitting_admin_endpoint_returns_200(self):
        self.client.credentials(**self._auth_header(self.admin))
        res = self.client.get("/api/members")
        self.assertEqual(res.status_code, 200)
        self.assertEqual({m["email"] for m in res.json()}, {"admin@test.com", "member@test.com"})

    def test_no_token_returns_401(self):
        res = self.client.get("/api/members")
        self.assertEqual(res.status_code, 401)
        self.assertIn("message", res.json())

    def test_other_organization_member_returns_404(self):
        self.client.credentials(**self._auth_header(self.other_admin))
        res = self.client.get(f"/api/members/{self.member.id}")
        self.assertEqual(res.status_code, 404)

    def test_member_can_read_program_years_but_not_write(self):
        self.client.credentials(**self._auth_header(self.member))
        self.assertEqual(self.client.get("/api/program-years").status_code, 200)
        res = self.client.post(
            "/api/program-years",
            {"name": "2026", "startDate": "2026-01-01", "endDate": "2027-01-01"},
            format="json",
        )
        self.assertEqual(res.status_code, 403)
