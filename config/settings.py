import os
from dotenv import load_dotenv
from urllib.parse import urlparse
from pathlib import Path
from datetime import timedelta

BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables from .env.
# override=True keeps .env as the single source of truth for app config.
load_dotenv(BASE_DIR / ".env", override=True)


def env_bool(name, default=False):
    val = os.environ.get(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "on")


def env_int(name, default):
    val = os.environ.get(name, "")
    return int(val) if val.strip().isdigit() else default


SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
DEBUG = env_bool("DEBUG", True)
ALLOWED_HOSTS = [
    h.strip()
    for h in os.environ.get("ALLOWED_HOSTS", "*").split(",")
    if h.strip()
]
CSRF_TRUSTED_ORIGINS = [
    o.strip()
    for o in os.environ.get("CSRF_TRUSTED_ORIGINS", "").split(",")
    if o.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # third-party
    "django.contrib.sites",
    "allauth",
    "allauth.account",
    "axes",
    # local apps
    "accounts.apps.AccountsConfig",
    "backend.apps.BackendConfig",
    "appearance.apps.AppearanceConfig",
    "locations.apps.LocationsConfig",
    "dashboard.apps.DashboardConfig",
]

AUTH_USER_MODEL = "accounts.User"
SITE_ID = 1

AUTHENTICATION_BACKENDS = (
    "axes.backends.AxesStandaloneBackend",
    "django.contrib.auth.backends.ModelBackend",
    "allauth.account.auth_backends.AuthenticationBackend",
)

# allauth (new-style settings)
ACCOUNT_LOGIN_METHODS = {"email"}
ACCOUNT_SIGNUP_FIELDS = ["email*", "password1*", "password2*"]
ACCOUNT_UNIQUE_EMAIL = True
ACCOUNT_EMAIL_VERIFICATION = "none"
ACCOUNT_USER_MODEL_USERNAME_FIELD = None
ACCOUNT_SESSION_REMEMBER = None
ACCOUNT_ADAPTER = "accounts.adapter.AdminAccountAdapter"
ACCOUNT_ALLOW_SIGNUP = env_bool("ACCOUNT_ALLOW_SIGNUP", False)
ACCOUNT_RATE_LIMITS = {
    "login": "10/m/ip",
    "login_failed": "5/10m/key",
    "reset_password": "20/m/ip,5/m/key",
}
LOGIN_REDIRECT_URL = "/"
LOGIN_URL = "account_login"
LOGOUT_REDIRECT_URL = "/"

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.Argon2PasswordHasher",
]

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "UserAttributeSimilarityValidator"
        )
    },
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "MinimumLengthValidator"
        ),
        "OPTIONS": {"min_length": 8},
    },
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "CommonPasswordValidator"
        )
    },
    {
        "NAME": (
            "django.contrib.auth.password_validation."
            "NumericPasswordValidator"
        )
    },
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "axes.middleware.AxesMiddleware",
    "allauth.account.middleware.AccountMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # color-scheme client hint
    "appearance.middleware.ThemeMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(BASE_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "appearance.context_processors.theme",
            ],
        },
    }
]

WSGI_APPLICATION = "config.wsgi.application"

_DB_NAME = os.environ.get("DB_NAME")
if _DB_NAME:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": _DB_NAME,
            "USER": os.environ.get("DB_USER", ""),
            "PASSWORD": os.environ.get("DB_PASSWORD", ""),
            "HOST": os.environ.get("DB_HOST", "localhost"),
            "PORT": os.environ.get("DB_PORT", "5432"),
            "OPTIONS": (
                {"sslmode": os.environ.get("DB_SSLMODE", "")}
                if os.environ.get("DB_SSLMODE")
                else {}
            ),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": str(BASE_DIR / "db.sqlite3"),
        }
    }

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATICFILES_DIRS = [BASE_DIR / "static"]
STATIC_ROOT = BASE_DIR / "static_build"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

SESSION_COOKIE_AGE = 60 * 60 * 24 * 14
SESSION_COOKIE_SAMESITE = "Lax"
if not DEBUG:
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

SECURE_SSL_REDIRECT = env_bool("SECURE_SSL_REDIRECT", False)
_hsts = os.environ.get("SECURE_HSTS_SECONDS")
SECURE_HSTS_SECONDS = int(_hsts) if (_hsts and _hsts.isdigit()) else 0
if env_bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", False):
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
if env_bool("SECURE_HSTS_PRELOAD", False):
    SECURE_HSTS_PRELOAD = True
if env_bool("USE_X_FORWARDED_PROTO", False):
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

EMAIL_BACKEND = os.environ.get(
    "EMAIL_BACKEND", "django.core.mail.backends.console.EmailBackend"
)
DEFAULT_FROM_EMAIL = os.environ.get(
    "DEFAULT_FROM_EMAIL", "Attendance Admin <noreply@localhost>"
)
SERVER_EMAIL = os.environ.get("SERVER_EMAIL", DEFAULT_FROM_EMAIL)
_admin_emails = os.environ.get("ADMIN_EMAILS", "")
_admin_name = os.environ.get("ADMIN_NAME", "Admin")
ADMINS = [
    (_admin_name, e.strip())
    for e in _admin_emails.split(",")
    if e.strip()
]

# Remote attendance backend (Appwrite-style document API)
BACKEND_ENDPOINT = os.environ.get("BACKEND_ENDPOINT", "")
BACKEND_PROJECT_ID = os.environ.get("BACKEND_PROJECT_ID", "")
BACKEND_API_KEY = os.environ.get("BACKEND_API_KEY", "")
BACKEND_DATABASE_ID = os.environ.get("BACKEND_DATABASE_ID", "")
BACKEND_LOCATIONS_COLLECTION_ID = os.environ.get("BACKEND_LOCATIONS_COLLECTION_ID", "")
BACKEND_STUDENTS_COLLECTION_ID = os.environ.get("BACKEND_STUDENTS_COLLECTION_ID", "")
BACKEND_COURSES_COLLECTION_ID = os.environ.get("BACKEND_COURSES_COLLECTION_ID", "")
BACKEND_ATTENDANCE_COLLECTION_ID = os.environ.get("BACKEND_ATTENDANCE_COLLECTION_ID", "")
BACKEND_TIMEOUT_SECONDS = env_int("BACKEND_TIMEOUT_SECONDS", 20)
BACKEND_PAGE_LIMIT = env_int("BACKEND_PAGE_LIMIT", 5000)

# Site URL for building absolute links
SITE_URL = os.environ.get("SITE_URL", "http://localhost:8000")

# Ensure SITE_URL host/origin are whitelisted even if env lists are missing
_parsed_site = urlparse(SITE_URL)
_site_host = _parsed_site.hostname
_site_origin = f"{_parsed_site.scheme}://{_parsed_site.hostname}"
if _parsed_site.port and _parsed_site.port not in (80, 443):
    _site_origin = f"{_parsed_site.scheme}://{_parsed_site.hostname}:{_parsed_site.port}"
if _site_host and "*" not in ALLOWED_HOSTS and _site_host not in ALLOWED_HOSTS:
    ALLOWED_HOSTS.append(_site_host)
if _parsed_site.scheme in ("http", "https") and _site_origin not in CSRF_TRUSTED_ORIGINS:
    CSRF_TRUSTED_ORIGINS.append(_site_origin)

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
        "mail_admins": {
            "level": "ERROR",
            "class": "django.utils.log.AdminEmailHandler",
        },
    },
    "loggers": {
        "backend": {"handlers": ["console"], "level": LOG_LEVEL},
        "locations": {"handlers": ["console"], "level": LOG_LEVEL},
        "appearance": {"handlers": ["console"], "level": LOG_LEVEL},
        "dashboard": {"handlers": ["console"], "level": LOG_LEVEL},
        "django.request": {
            "handlers": ["mail_admins"],
            "level": "ERROR",
            "propagate": True,
        },
        "django.security": {
            "handlers": ["mail_admins"],
            "level": "ERROR",
            "propagate": True,
        },
        "django.security.DisallowedHost": {
            "handlers": [],
            "level": "CRITICAL",
            "propagate": False,
        },
    },
}

AXES_ENABLED = env_bool("AXES_ENABLED", True)
AXES_FAILURE_LIMIT = 5
AXES_COOLOFF_TIME = timedelta(minutes=15)
AXES_LOCK_OUT_AT_FAILURE = True
AXES_LOCKOUT_PARAMETERS = ["username", "ip_address"]
AXES_RESET_ON_SUCCESS = True
AXES_LOCKOUT_TEMPLATE = "account/lockout.html"
