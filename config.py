import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _setting(key, default=None):
    # Environment variables win over env.yaml so secrets can stay out of files
    return os.environ.get(key, data.get(key, default))


def _flag(key, default=False):
    value = _setting(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ApplicationConfig:
    DB_URI = _setting("DB_URI", "sqlite+aiosqlite:///./account.db")
    DB_AUTO_CREATE = _flag("DB_AUTO_CREATE", True)
    STORAGE_BACKEND = _setting("STORAGE_BACKEND", "database")  # database | memory
    API_PREFIX = _setting("API_PREFIX", "/api")
    API_PORT = int(_setting("API_PORT", 8000))
    API_HOST = _setting("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _flag("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _setting("LOG_LEVEL", "INFO")
    SESSION_SECRET = _setting("SESSION_SECRET", "some-secret-key-for-dev-only")
    SESSION_MAX_AGE = int(_setting("SESSION_MAX_AGE", 24 * 60 * 60))
    SESSION_HTTPS_ONLY = _flag("SESSION_HTTPS_ONLY", False)
    APP_URL = _setting("APP_URL", "http://localhost:8000")
    MAILGUN_API_KEY = _setting("MAILGUN_API_KEY", "")
    MAILGUN_DOMAIN = _setting("MAILGUN_DOMAIN", "")
    MAILGUN_FROM_EMAIL = _setting("MAILGUN_FROM_EMAIL", "")
    MAILGUN_API_BASE = _setting("MAILGUN_API_BASE", "https://api.mailgun.net/v3")
    MAIL_TIMEOUT = float(_setting("MAIL_TIMEOUT", 10))
