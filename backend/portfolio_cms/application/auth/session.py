import hmac
from flask import current_app
from flask_jwt_extended import create_access_token


class AuthError(Exception):
    """Credentials did not match the configured admin."""


def _matches(given, expected):
    # Exact match only; a number never equals the configured string
    if not isinstance(given, str):
        return False
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def login(username: str, password: str) -> str:
    """
    Exchange the admin credentials for a signed session token.
    The token expires after JWT_ACCESS_TOKEN_EXPIRES (8h by default).
    """
    config = current_app.config

    username_ok = _matches(username, config["ADMIN_USERNAME"])
    password_ok = _matches(password, config["ADMIN_PASSWORD"])

    if not (username_ok and password_ok):
        raise AuthError("Invalid credentials")

    return create_access_token(identity=config["ADMIN_USERNAME"])
