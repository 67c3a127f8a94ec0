import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URI", f"sqlite:///{os.path.join(basedir, 'cms.db')}"
    )
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Single admin identity, compared verbatim on login
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "sam")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "1234")

    # Session token
    JWT_SECRET_KEY = os.getenv(
        "JWT_SECRET_KEY", "your-super-secret-key-that-is-long-and-random"
    )
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_ACCESS_COOKIE_PATH = "/"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=8)
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_SECURE = False
    JWT_COOKIE_CSRF_PROTECT = False

    # Uploads
    UPLOAD_FOLDER = os.path.abspath(
        os.getenv("UPLOAD_FOLDER") or os.path.join(basedir, "uploads")
    )
    UPLOAD_FIELD = "images"
    MAX_UPLOAD_FILES = 10
    # No request size limit unless one is configured
    MAX_CONTENT_LENGTH = (
        int(os.getenv("MAX_CONTENT_LENGTH")) if os.getenv("MAX_CONTENT_LENGTH") else None
    )
    PRUNE_ORPHAN_UPLOADS = os.getenv("PRUNE_ORPHAN_UPLOADS", "true").lower() == "true"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DEV_DATABASE_URI", BaseConfig.SQLALCHEMY_DATABASE_URI
    )


class ProductionConfig(BaseConfig):
    DEBUG = False
    JWT_COOKIE_SECURE = True
    # The persistent disk is mounted at the upload folder, so the
    # database lives there too.
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URI",
        f"sqlite:///{os.path.join(BaseConfig.UPLOAD_FOLDER, 'cms.db')}",
    )


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-secret"
    LOG_LEVEL = "WARNING"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
