import os
from datetime import timedelta

FEATURES_FULL = "with-auth-and-upload"
FEATURES_BASIC = "basic"


class BaseConfig:
    """Settings shared by every environment, read from the process environment."""

    def __init__(self):
        self.SECRET_KEY = os.environ.get("SECRET_KEY", "change-me-in-production")
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Storage backend selected once for the process lifetime
        self.DATA_BACKEND = os.environ.get("DATA_BACKEND", "cloudsql")
        self.SQLALCHEMY_DATABASE_URI = os.environ.get(
            "SQLALCHEMY_DATABASE_URI", "sqlite:///cameras.db")
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False

        self.CAMERA_FEATURES = os.environ.get("CAMERA_FEATURES", FEATURES_FULL)

        # Image upload configuration
        self.GCS_BUCKET_NAME = os.environ.get("GCS_BUCKET_NAME")
        self.ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif'}
        self.MAX_CONTENT_LENGTH = 5 * 1024 * 1024  # 5MB max image size

        # Google OAuth2 configuration
        self.GOOGLE_OAUTH2_CLIENT_ID = os.environ.get("GOOGLE_OAUTH2_CLIENT_ID")
        self.GOOGLE_OAUTH2_CLIENT_SECRET = os.environ.get("GOOGLE_OAUTH2_CLIENT_SECRET")
        self.GOOGLE_OAUTH2_REDIRECT_URI = os.environ.get(
            "GOOGLE_OAUTH2_REDIRECT_URI", "http://localhost:8080/auth/google/callback")

        # JWT Configuration, the identity travels in a cookie
        self.JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "your-secret-key")
        self.JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=24)
        self.JWT_TOKEN_LOCATION = ["cookies"]
        self.JWT_COOKIE_SECURE = os.environ.get("JWT_COOKIE_SECURE", "False").lower() == "true"
        self.JWT_CSRF_CHECK_FORM = True

    @property
    def AUTH_ENABLED(self):
        return self.CAMERA_FEATURES == FEATURES_FULL

    @property
    def IMAGE_UPLOAD_ENABLED(self):
        return self.CAMERA_FEATURES == FEATURES_FULL
