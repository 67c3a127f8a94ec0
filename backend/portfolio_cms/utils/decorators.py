from functools import wraps
from flask import current_app, jsonify
from flask_jwt_extended import (
    get_jwt_identity,
    unset_jwt_cookies,
    verify_jwt_in_request,
)


def admin_required(fn):
    """
    Single guard for every protected route.

    Token problems (missing, tampered, expired) are answered by the JWT
    loaders registered in ``portfolio_cms.errors``; a well-signed token for
    someone other than the configured admin is rejected here.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        if get_jwt_identity() != current_app.config["ADMIN_USERNAME"]:
            response = jsonify({"message": "Unauthorized: Invalid token"})
            unset_jwt_cookies(response)
            return response, 401

        return fn(*args, **kwargs)
    return wrapper
