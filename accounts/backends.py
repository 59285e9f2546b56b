"""
Authentication backend: email + password, email unique per organization.
"""
from django.contrib.auth.backends import ModelBackend

from accounts.models import Member, normalize_member_email


class MemberEmailBackend(ModelBackend):
    """
    Resolve a member by case-insensitive email. The same address may exist in
    several organizations; the active member whose password matches wins.
    """

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = normalize_member_email(email or username)
        if not email or not password:
            return None
        candidates = Member.objects.filter(email__iexact=email).select_related('organization').order_by('id')
        for member in candidates:
            if member.check_password(password) and self.user_can_authenticate(member):
                return member
        if not candidates:
            # Same hashing cost for unknown emails
            Member().set_password(password)
        return None
