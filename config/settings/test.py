"""Test settings for RealtorHub project.

Used by pytest-django (see ``pyproject.toml``). Runs against an in-memory
SQLite database and a fixed time zone so calendar tests are deterministic.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

TIME_ZONE = 'America/Los_Angeles'

REALTOR_USERNAME = 'alexmorgan'

CALENDAR_FIRST_WEEKDAY = 6

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

LOGGING['loggers']['apps']['level'] = 'WARNING'  # noqa: F405
