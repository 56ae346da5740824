# taskflow/settings.py
"""
Django settings for the taskflow project.

Every deployment-specific value is read from a TASKFLOW_* environment
variable so the same module serves development, tests and production.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default=''):
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


SECRET_KEY = os.environ.get('TASKFLOW_SECRET_KEY', 'django-insecure-taskflow-development-key')
DEBUG = _env_bool('TASKFLOW_DEBUG', default=False)
ALLOWED_HOSTS = _env_list('TASKFLOW_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver')

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'rest_framework',
    'taskflow_user',
    'taskflow_app',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
]

ROOT_URLCONF = 'taskflow.urls'
WSGI_APPLICATION = 'taskflow.wsgi.application'

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('TASKFLOW_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('TASKFLOW_DB_NAME', str(BASE_DIR / 'taskflow.sqlite3')),
        'USER': os.environ.get('TASKFLOW_DB_USER', ''),
        'PASSWORD': os.environ.get('TASKFLOW_DB_PASSWORD', ''),
        'HOST': os.environ.get('TASKFLOW_DB_HOST', ''),
        'PORT': os.environ.get('TASKFLOW_DB_PORT', ''),
    }
}

AUTH_USER_MODEL = 'taskflow_user.User'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'taskflow.exceptions.api_exception_handler',
}

LOG_LEVEL = os.environ.get('TASKFLOW_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '%(asctime)s %(levelname)s [%(name)s] %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'taskflow': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'taskflow_user': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'taskflow_app': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'taskflow_client': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': False},
        'django.request': {'handlers': ['console'], 'level': 'ERROR', 'propagate': False},
    },
}
