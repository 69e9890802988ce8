"""Django settings for the ticket storefront.

The external store is identified by two required environment values:
STOREFRONT_STORE_URL and STOREFRONT_STORE_KEY. Startup fails if either is absent.
"""

import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def require_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise ImproperlyConfigured(f"Missing required environment variable {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


def store_database(url: str, key: str, timeout: int) -> dict:
    """Build a DATABASES entry from the store URL and credential."""
    parts = urlsplit(url)
    if parts.scheme == "sqlite":
        name = unquote(parts.path.lstrip("/")) or unquote(parts.netloc) or ":memory:"
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": name,
            "OPTIONS": {"timeout": timeout},
        }
    if parts.scheme in {"postgres", "postgresql"}:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": unquote(parts.path.lstrip("/")),
            "USER": unquote(parts.username or ""),
            "PASSWORD": key,
            "HOST": parts.hostname or "",
            "PORT": str(parts.port or ""),
            "OPTIONS": {
                "connect_timeout": timeout,
                "options": f"-c statement_timeout={timeout * 1000}",
            },
        }
    raise ImproperlyConfigured(f"Unsupported store URL scheme: {parts.scheme!r}")


STORE_URL = require_env("STOREFRONT_STORE_URL")
STORE_KEY = require_env("STOREFRONT_STORE_KEY")
STORE_TIMEOUT = int(os.environ.get("STOREFRONT_STORE_TIMEOUT", "5"))

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-storefront-dev-key")
DEBUG = _env_bool("DJANGO_DEBUG")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "events",
    "orders",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {"default": store_database(STORE_URL, STORE_KEY, STORE_TIMEOUT)}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "fr-fr"
TIME_ZONE = "Europe/Paris"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

STOREFRONT = {
    "ORDER_NUMBER_PREFIX": os.environ.get("STOREFRONT_ORDER_PREFIX", "BE"),
    "ORDER_NUMBER_ATTEMPTS": int(os.environ.get("STOREFRONT_ORDER_NUMBER_ATTEMPTS", "3")),
    "BANK_TRANSFER": {
        "account_holder": os.environ.get("STOREFRONT_BANK_ACCOUNT_HOLDER", ""),
        "iban": os.environ.get("STOREFRONT_BANK_IBAN", ""),
        "bic": os.environ.get("STOREFRONT_BANK_BIC", ""),
    },
}

LOG_LEVEL = os.environ.get("STOREFRONT_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "events": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "orders": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
