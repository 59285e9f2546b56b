"""
Management command to seed development data.
Usage: python manage.py seed_dev
"""
from datetime import date, time, timedelta
import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

User = get_user_model()


class Command(BaseCommand):
    help = 'Seed development data: 1 organization, 1 admin, 1 member, a current program year, 1 audition date'

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS('Starting seed data...'))

        with transaction.atomic():
            from core.models import Organization
            org, _ = Organization.objects.get_or_create(
                slug='my-choir',
                defaults={'name': 'My Choir'},
            )
            self.stdout.write(self.style.SUCCESS(f'Organization: {org.name}'))

            admin_email = os.getenv('SEED_ADMIN_EMAIL', 'admin@example.com')
            admin_password = os.getenv('SEED_ADMIN_PASSWORD', 'password')
            self._seed_member(org, admin_email, admin_password, 'Admin', 'User', User.ROLE_ADMIN)

            member_password = os.getenv('SEED_MEMBER_PASSWORD', 'password')
            self._seed_member(org, 'member@example.com', member_password, 'Member', 'User', User.ROLE_MEMBER)

            from program_years.models import ProgramYear
            from program_years.services import activate_program_year
            today = date.today()
            year, created = ProgramYear.objects.get_or_create(
                organization=org,
                name=f'{today.year}-{today.year + 1}',
                defaults={
                    'start_date': date(today.year, 1, 1),
                    'end_date': date(today.year + 1, 1, 1),
                },
            )
            activate_program_year(year.id, org.id)
            self.stdout.write(self.style.SUCCESS(f'Program year: {year.name} (current)'))

            from auditions.models import AuditionDate
            from auditions.services import create_audition_date
            if not AuditionDate.objects.filter(organization=org, program_year=year).exists():
                audition_date = create_audition_date(
                    org.id,
                    program_year_id=year.id,
                    date=today + timedelta(days=14),
                    start_time=time(9, 0),
                    end_time=time(12, 0),
                    block_length_minutes=15,
                )
                self.stdout.write(self.style.SUCCESS(
                    f'Audition date: {audition_date.date} ({len(audition_date.slots.all())} slots), '
                    f'public link /api/public/auditions/{audition_date.id}'
                ))

        self.stdout.write(self.style.SUCCESS('Seed data complete.'))
        self.stdout.write(f'Admin login: {admin_email} / {admin_password}')

    def _seed_member(self, org, email, password, first_name, last_name, role):
        member = User.objects.filter(organization=org, email__iexact=email).first()
        if member is None:
            member = User.objects.create_user(
                email,
                password,
                organization=org,
                first_name=first_name,
                last_name=last_name,
                role=role,
            )
            self.stdout.write(self.style.SUCCESS(f'Created {role.lower()}: {email}'))
        else:
            member.set_password(password)
            member.role = role
            member.is_active = True
            member.save()
            self.stdout.write(self.style.WARNING(f'{role} exists, password updated: {email}'))
        return member
