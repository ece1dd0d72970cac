from datetime import timedelta
from dotenv import load_dotenv
import os

# ===================================================
# 🏗 BASE CONFIG PATH SETUP
# ===================================================
BASE_DIR = os.path.abspath(os.path.dirname(__file__))

load_dotenv()

# ===================================================
# ⚙️ MAIN CONFIG CLASS
# ===================================================

class Config:
    # --------------------------------------------------
    # 🔐 CORE APP SETTINGS
    # --------------------------------------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_only_change_me")

    DEBUG = os.environ.get("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")

    PERMANENT_SESSION_LIFETIME = timedelta(days=30)
    REMEMBER_COOKIE_DURATION = timedelta(days=30)

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_PROTECTION = "strong"

    # --------------------------------------------------
    # 🗄 DATABASE
    # --------------------------------------------------
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "lenderportal.db"),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --------------------------------------------------
    # 📁 FILE UPLOADS
    # --------------------------------------------------
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "static", "uploads"))
    MAX_CONTENT_LENGTH = 4 * 1024 * 1024  # 4 MB, profile pictures are capped at 2 MB by the form

    # --------------------------------------------------
    # 🧱 BOOTSTRAP FORMS
    # --------------------------------------------------
    # Grid classes for horizontal forms: label column / field column.
    BOOTSTRAP_FORM_LEFT_COLUMN = os.environ.get("BOOTSTRAP_FORM_LEFT_COLUMN", "col-sm-3")
    BOOTSTRAP_FORM_RIGHT_COLUMN = os.environ.get("BOOTSTRAP_FORM_RIGHT_COLUMN", "col-sm-9")

    # --------------------------------------------------
    # 🌍 TRANSLATIONS
    # --------------------------------------------------
    TRANSLATION_FOLDER = os.path.join(BASE_DIR, "translations")
    TRANSLATION_LOCALE = os.environ.get("TRANSLATION_LOCALE", "en")
    FALLBACK_LOCALE = "en"

    # --------------------------------------------------
    # 📝 LOGGING
    # --------------------------------------------------
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    WTF_CSRF_ENABLED = False
    LOGIN_DISABLED = False
    # FlaskLoginClient only sets _user_id, so "strong" would log it straight out.
    SESSION_PROTECTION = None
    LOG_LEVEL = "DEBUG"
