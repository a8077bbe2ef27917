"""
Django settings for the sitemap_xsl project.

Values come from the environment (or a .env file loaded by manage.py)
through python-decouple.
"""

from pathlib import Path

from decouple import Csv, config

BASE_DIR = Path(__file__).resolve().parent

SECRET_KEY = config("SECRET_KEY", default="django-insecure-sitemap-xsl-dev-key")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "src.stylesheets.apps.StylesheetsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "src.core.middleware.StylesheetResponseMiddleware",
]

ROOT_URLCONF = "sitemap_xsl.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

ASGI_APPLICATION = "sitemap_xsl.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": config("DATABASE_NAME", default=str(BASE_DIR / "db.sqlite3")),
    }
}

# Internationalization
LANGUAGE_CODE = config("LANGUAGE_CODE", default="en-us")
LANGUAGES = [
    ("en", "English"),
    ("de", "Deutsch"),
    ("es", "Español"),
    ("ru", "Русский"),
    ("ar", "العربية"),
]
LOCALE_PATHS = [BASE_DIR / "locale"]
USE_I18N = True
USE_TZ = True
TIME_ZONE = "UTC"

# Sitemap stylesheets
SITEMAP_STYLESHEET_STRICT = config("SITEMAP_STYLESHEET_STRICT", default=False, cast=bool)
SITEMAP_STYLESHEET_DOCS_URL = config(
    "SITEMAP_STYLESHEET_DOCS_URL", default="https://www.sitemaps.org/"
)
SITEMAP_STYLESHEET_GENERATOR = config("SITEMAP_STYLESHEET_GENERATOR", default="Django")
# {"sitemap" | "index" | "css": "dotted.path.to.callable"}
SITEMAP_STYLESHEET_HOOKS = {}

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "src": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
