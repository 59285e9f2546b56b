"""
Development settings
"""
from .base import *  # noqa: F401,F403
from .base import BASE_DIR, env

DEBUG = True

# Local SQLite when no PostgreSQL is configured
if not (env.str('DATABASE_URL', default='') or env.str('DB_NAME', default='')):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

# Email backend (console for development)
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
