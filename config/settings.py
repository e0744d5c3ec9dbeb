# config/settings.py

import os
from datetime import timedelta

def str_to_bool(value):
    truthy = ("true", "1", "yes", "on")
    falsey = ("false", "0", "no", "off")

    val = str(value).strip().lower()

    if val in truthy:
        return True
    elif val in falsey:
        return False
    else:
        raise ValueError(f"Invalid boolean string: '{value}'")

# Storage settings
STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "sql").strip().lower()
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///workshop.db")
SEED_SAMPLE_DATA = str_to_bool(os.environ.get("SEED_SAMPLE_DATA", "False"))

# Session settings
SESSION_SECRET = os.environ.get("SESSION_SECRET") or os.environ.get("SECRET_KEY")
SESSION_PERMANENT_SESSION_LIFETIME_HOURS = int(os.environ.get("SESSION_PERMANENT_SESSION_LIFETIME_HOURS", 24))

# Seed admin (created at startup when both are set)
ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD")
ADMIN_DISPLAY_NAME = os.environ.get("ADMIN_DISPLAY_NAME", "Workshop Admin")

# Language-model provider
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-1.5-pro")
GEMINI_TIMEOUT = float(os.environ.get("GEMINI_TIMEOUT", 60))
GEMINI_API_BASE = os.environ.get(
    "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
)

# Uploads
UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.abspath("uploads"))
MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", 10))

# Application version
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

class Config:
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = SESSION_SECRET
    TESTING = False

    PERMANENT_SESSION_LIFETIME = timedelta(hours=SESSION_PERMANENT_SESSION_LIFETIME_HOURS)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"

    # Additional configuration
    APP_VERSION = APP_VERSION
    LOG_LEVEL = LOG_LEVEL

    # Data store
    STORAGE_BACKEND = STORAGE_BACKEND
    SEED_SAMPLE_DATA = SEED_SAMPLE_DATA

    # Seed admin
    ADMIN_USERNAME = ADMIN_USERNAME
    ADMIN_PASSWORD = ADMIN_PASSWORD
    ADMIN_DISPLAY_NAME = ADMIN_DISPLAY_NAME

    # Gemini
    GEMINI_API_KEY = GEMINI_API_KEY
    GEMINI_MODEL = GEMINI_MODEL
    GEMINI_TIMEOUT = GEMINI_TIMEOUT
    GEMINI_API_BASE = GEMINI_API_BASE

    # Uploads
    UPLOAD_FOLDER = UPLOAD_FOLDER
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}
