"""
settings.py — Django project configuration for Roster

What this file configures
===============================================================================
- Core Django wiring (INSTALLED_APPS, MIDDLEWARE, TEMPLATES, DB)
- REST Framework defaults (open access, filtering, form/multipart parsers)
- CORS for FE ↔ BE requests
- Static files via WhiteNoise, profile picture uploads under the public root
- Swagger (drf-yasg) for the /api/users/ read + write endpoints
- CSP (django-csp v4) with a tight default policy for the admin screen
- Logging for the request pipeline and the `users` app

How environment variables drive behavior (deployment-safe)
===============================================================================
DJANGO_DEBUG            -> Enables dev mode when true. Defaults to True locally.
DJANGO_SECRET_KEY       -> Required when DJANGO_DEBUG=False (production).
DJANGO_ALLOWED_HOSTS    -> Comma-separated list of allowed hostnames in prod.
CORS_ALLOW_ALL_ORIGINS  -> Dev toggle to allow any origin (default True in dev).
CORS_ALLOWED_ORIGINS    -> Comma-separated list of exact origins (prod).
DATABASE_URL            -> Postgres (or any dj-database-url URL); SQLite otherwise.
ROSTER_PUBLIC_ROOT      -> Served public root. Uploads go to <root>/uploads/.
ROSTER_LOG_LEVEL        -> Level for the `users` logger (default INFO).

Quick reference of important sections
===============================================================================
REST_FRAMEWORK  -> AllowAny, filters, parsers. There is no auth model.
DATABASES       -> SQLite in dev; DATABASE_URL switches to Postgres.
Uploads         -> ROSTER_PUBLIC_ROOT + ROSTER_UPLOAD_SUBDIR; served at
                   MEDIA_URL (/uploads/) while DEBUG=True.
Form options    -> ROSTER_GENDER_OPTIONS / ROSTER_SKILL_OPTIONS feed the
                   field catalog in users/form_config.py.
"""

from pathlib import Path
from urllib.parse import urlparse
import os


# ---------------------------
# Helpers for env parsing
# ---------------------------
def _get_bool(env_key: str, default: bool = False) -> bool:
    """Parse booleans from env like '1', 'true', 'yes'."""
    raw = os.environ.get(env_key, str(default))
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}

def _get_list(env_key: str, default=None):
    """Parse comma-separated lists from env (e.g., 'a.com,b.com')."""
    if default is None:
        default = []
    raw = os.environ.get(env_key)
    if not raw:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]

def _origin_from(url: str) -> str:
    """Turn a full URL into an origin string (scheme://host[:port])."""
    p = urlparse(url or "")
    if not p.scheme or not p.hostname:
        return ""
    return f"{p.scheme}://{p.hostname}" + (f":{p.port}" if p.port else "")


BASE_DIR = Path(__file__).resolve().parent.parent

# Reads DJANGO_DEBUG from env. Defaults to True for dev.
DEBUG = _get_bool("DJANGO_DEBUG", True)


# --- Frontend URL & CORS/CSRF (dev-friendly defaults) ---
# The admin screen is server-rendered, but the JSON API can be called from a
# separate frontend (e.g. a Vite dev server).
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173/")

CORS_ALLOW_ALL_ORIGINS = _get_bool("CORS_ALLOW_ALL_ORIGINS", DEBUG)

CORS_ALLOWED_ORIGINS = _get_list("CORS_ALLOWED_ORIGINS", [])
if not CORS_ALLOWED_ORIGINS and FRONTEND_URL:
    derived = _origin_from(FRONTEND_URL)
    if derived:
        CORS_ALLOWED_ORIGINS = [derived]

CSRF_TRUSTED_ORIGINS = _get_list("CSRF_TRUSTED_ORIGINS", [])
if not CSRF_TRUSTED_ORIGINS and FRONTEND_URL:
    derived = _origin_from(FRONTEND_URL)
    if derived:
        CSRF_TRUSTED_ORIGINS = [derived]

# django-csp v4+ format. The users page carries one inline <script> for the
# picture preview, so scripts are allowed from 'self' plus inline.
CONTENT_SECURITY_POLICY = {
    "DIRECTIVES": {
        "default-src": ["'self'"],
        "img-src": ["'self'", "blob:", "data:"],
        "script-src": ["'self'", "'unsafe-inline'"],
        "style-src": ["'self'", "'unsafe-inline'"],
        "frame-ancestors": ["'self'"],
    }
}


# SECRET_KEY with safe production enforcement
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY") or (
    "django-insecure-roster-dev-key-7u$1c^w0v!r8m#p2q9z4l6x3b5n0k" if DEBUG else None
)
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG=False")


ALLOWED_HOSTS = _get_list("DJANGO_ALLOWED_HOSTS", [] if DEBUG else ["127.0.0.1"])


INSTALLED_APPS = [
    # Django core
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party
    'rest_framework',
    'corsheaders',
    'django_filters',                             # filtering backend for DRF
    'drf_yasg',                                   # Swagger/OpenAPI docs

    # Local apps
    'users',
    'csp',
]

SWAGGER_SETTINGS = {
    "USE_SESSION_AUTH": False,
    "SECURITY_DEFINITIONS": {},
}

MIDDLEWARE = [
    # CORS should be as high as possible
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.common.CommonMiddleware',

    'django.middleware.security.SecurityMiddleware',
    "csp.middleware.CSPMiddleware",
    'whitenoise.middleware.WhiteNoiseMiddleware',  # Serves static in prod
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

REST_FRAMEWORK = {
    # No authorization model: the admin screen and its API are open.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.AllowAny",
    ),
    "DEFAULT_FILTER_BACKENDS": (
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.SearchFilter",
        "rest_framework.filters.OrderingFilter",
    ),
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
        "rest_framework.parsers.JSONParser",
    ],
}

ROOT_URLCONF = 'roster_backend.urls'
WSGI_APPLICATION = 'roster_backend.wsgi.application'

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


# --- Database (Postgres when DATABASE_URL set; SQLite otherwise) ---
import dj_database_url

DB_URL = os.environ.get("DATABASE_URL", "").strip()
IS_POSTGRES = DB_URL.startswith("postgres://") or DB_URL.startswith("postgresql://")

if DB_URL:
    DATABASES = {
        "default": dj_database_url.parse(
            DB_URL,
            conn_max_age=600,
            ssl_require=IS_POSTGRES,  # only apply SSL flag for Postgres URLs
        )
    }
else:
    # Default to SQLite for local dev/CI
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }


# Applied by `manage.py createsuperuser`, the only account the /admin/ site needs.
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / "staticfiles"

# --- Public root & uploads ---------------------------------------------------
# Records store "/uploads/<ms>.<ext>", i.e. a path relative to the public root.
ROSTER_PUBLIC_ROOT = Path(os.environ.get("ROSTER_PUBLIC_ROOT", BASE_DIR / "public"))
ROSTER_UPLOAD_SUBDIR = "uploads"

MEDIA_URL = f"/{ROSTER_UPLOAD_SUBDIR}/"
MEDIA_ROOT = ROSTER_PUBLIC_ROOT / ROSTER_UPLOAD_SUBDIR

# --- Form options --------------------------------------------------------------
ROSTER_GENDER_OPTIONS = ["Male", "Female", "Others"]
ROSTER_SKILL_OPTIONS = ["JS", "Python", "Java"]

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "django.request": {  # 500s, 404s with exceptions
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": True,
        },
        "django": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "users": {
            "handlers": ["console"],
            "level": os.environ.get("ROSTER_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
