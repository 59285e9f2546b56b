"""
Test settings: in-memory SQLite (or TEST_DATABASE_URL), fast hashing,
in-memory mail outbox.
"""
import os

os.environ.setdefault('DATABASE_URL', 'sqlite://:memory:')

from .base import *  # noqa: E402,F401,F403
from .base import env  # noqa: E402

DEBUG = False

# Point TEST_DATABASE_URL at PostgreSQL to run the concurrent sign-up test
DATABASES = {
    'default': env.db('TEST_DATABASE_URL', default='sqlite://:memory:'),
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'
