import logging
import os
from datetime import timedelta

from corsheaders.defaults import default_headers
from dotenv import load_dotenv

load_dotenv()

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

ROOT_DIR = os.path.dirname(PROJECT_DIR)

APPS_DIR = os.path.join(PROJECT_DIR, 'ats')

BASE_DIR = os.path.join(PROJECT_DIR, 'config')


def env_bool(name, default='False'):
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def env_list(name, default=''):
    return [
        value.strip() for value in os.environ.get(name, default).split(',')
        if value.strip()
    ]


DEBUG = env_bool('DEBUG')

SECRET_KEY = os.environ.get('SECRET_KEY', 'ats-insecure-development-key-change-me')

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')

ALLOWED_HOSTS = env_list('ALLOWED_HOSTS', '*')

DJANGO_APPS = (
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
)

THIRD_PARTY_APPS = (
    'corsheaders',
    'rest_framework',
    'django_filters',
    'rangefilter',
)

PROJECT_APPS = (
    'ats.common',
    'ats.users',
    'ats.recruitment',
)

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + PROJECT_APPS

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
]

AUTH_USER_MODEL = 'users.User'

TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

LANGUAGE_CODE = 'en'

USE_I18N = True

USE_TZ = True

STATIC_ROOT = os.environ.get('STATIC_ROOT', os.path.join(ROOT_DIR, 'static/'))
STATIC_URL = '/static/'

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Database
# Postgres in every deployed environment, sqlite file when no database is configured.
if os.environ.get('DATABASE_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql_psycopg2',
            'NAME': os.environ.get('DATABASE_NAME'),
            'USER': os.environ.get('DATABASE_USER', None),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', None),
            'HOST': os.environ.get('DATABASE_HOST', 'localhost'),
            'PORT': os.environ.get('DATABASE_PORT', '5432'),
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(PROJECT_DIR, 'db.sqlite3'),
        },
    }

# CORS
CORS_ORIGIN_ALLOW_ALL = env_bool('CORS_ORIGIN_ALLOW_ALL', 'True')
CORS_ALLOWED_ORIGINS = env_list('CORS_ALLOWED_ORIGINS')
CORS_ALLOW_HEADERS = default_headers + (
    'Accept-Confirm',
)

# Rest Framework Config
DRF_RENDERER_CLASSES = ['rest_framework.renderers.JSONRenderer']
DRF_AUTH_CLASSES = [
    'rest_framework_simplejwt.authentication.JWTAuthentication',
    'rest_framework.authentication.SessionAuthentication'
]

DRF_BROWSABLE_API = env_bool('DRF_BROWSABLE_API')

if DRF_BROWSABLE_API:
    DRF_RENDERER_CLASSES.append('rest_framework.renderers.BrowsableAPIRenderer')
# End Rest Framework Config

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': DRF_AUTH_CLASSES,
    'DEFAULT_PAGINATION_CLASS': 'ats.core.pagination.PageLimitPagination',
    'DEFAULT_FILTER_BACKENDS': (
        'django_filters.rest_framework.DjangoFilterBackend',
        'ats.core.utils.filters.OrderStringFilter',
    ),
    'DEFAULT_RENDERER_CLASSES': DRF_RENDERER_CLASSES,
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

# Pagination defaults, see ats.core.pagination
DEFAULT_PAGE_LIMIT = int(os.environ.get('DEFAULT_PAGE_LIMIT', 100))

# Comments can be edited by their author within this window
COMMENT_EDIT_WINDOW_HOURS = int(os.environ.get('COMMENT_EDIT_WINDOW_HOURS', 24))

# Vacancy status names counted as active on the dashboard
ACTIVE_VACANCY_STATUSES = env_list(
    'ACTIVE_VACANCY_STATUSES', 'Abierta,Abierto,Open'
)

# Begin Access/Refresh Token Config
ACCESS_TOKEN_LIFETIME = os.environ.get('ACCESS_TOKEN_LIFETIME', '6;hours')
REFRESH_TOKEN_LIFETIME = os.environ.get('REFRESH_TOKEN_LIFETIME', '7;days')


def generate_timedelta(td_string):
    try:
        _duration, _type = td_string.split(';')
        return timedelta(**{_type: int(_duration)})
    except (ValueError, TypeError):
        raise ValueError(f"{td_string} is invalid. use 5;minutes OR 30;days format")


ACCESS_TOKEN_VALUE = generate_timedelta(ACCESS_TOKEN_LIFETIME)
REFRESH_TOKEN_VALUE = generate_timedelta(REFRESH_TOKEN_LIFETIME)
# End Access/Refresh Token Config

# Simple JWT Config
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': ACCESS_TOKEN_VALUE,
    'REFRESH_TOKEN_LIFETIME': REFRESH_TOKEN_VALUE,
    'ROTATE_REFRESH_TOKENS': True,

    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,

    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
    'UPDATE_LAST_LOGIN': True,

    'AUTH_TOKEN_CLASSES': ('rest_framework_simplejwt.tokens.AccessToken',),
    'TOKEN_TYPE_CLAIM': 'token_type',
}
# /Simple JWT Config ends

SHOW_LOGS_ON_CONSOLE = env_bool('SHOW_LOGS_ON_CONSOLE')

# LOGGING FORMATS AND CONFIGURATIONS
LOG_DIRECTORY = os.environ.get('LOG_DIRECTORY', os.path.join(
    PROJECT_DIR if ENVIRONMENT == 'development' else ROOT_DIR,
    'logs'
))
if not os.path.exists(LOG_DIRECTORY):
    os.makedirs(LOG_DIRECTORY, exist_ok=True)

extend_logging = dict()
extend_handlers = dict()


class RequireConsoleLog(logging.Filter):
    def filter(self, record):
        allowed_site_packages = ('django', 'rest_framework')
        if 'site-packages' in record.pathname:
            return any([x in record.pathname for x in allowed_site_packages])
        return SHOW_LOGS_ON_CONSOLE


for module in PROJECT_APPS:
    extend_logging.update({
        module: {
            'handlers': [module],
            'propagate': False,
        }
    })
    extend_handlers.update({
        module: {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'formatter': 'verbose',
            'filename': os.path.join(
                LOG_DIRECTORY, module.split('.')[1] + '.log'
            ),
            'when': 'midnight',
        }
    })

# ats.core is shared by every app and logs to its own file
extend_logging.update({
    'ats.core': {
        'handlers': ['ats.core'],
        'propagate': False,
    }
})
extend_handlers.update({
    'ats.core': {
        'level': 'DEBUG',
        'class': 'logging.handlers.TimedRotatingFileHandler',
        'formatter': 'verbose',
        'filename': os.path.join(LOG_DIRECTORY, 'core.log'),
        'when': 'midnight',
    }
})

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '\n%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s',
        },
        'simple': {
            'format': '{levelname} {message} -->from [{module}]',
            'style': '{'
        },
    },
    'filters': {
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue',
        },
        'require_console_log': {
            '()': RequireConsoleLog
        }
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'debug.log'),
            'formatter': 'verbose',
            'when': 'midnight',
        },
        'console': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', 'require_console_log'],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'django': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'django.log'),
            'formatter': 'verbose',
        },
        'database': {
            'level': 'DEBUG',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'database.log'),
            'formatter': 'verbose',
        },
        **extend_handlers
    },
    'loggers': {
        '': {
            'handlers': ['default', 'console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django': {
            'handlers': ['django'],
            'propagate': True,
        },
        'django.db.backends': {
            'handlers': ['database'],
            'propagate': False,
        },
        **extend_logging
    },
}
