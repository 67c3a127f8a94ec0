from flask import current_app, jsonify, request
from flask_jwt_extended import unset_jwt_cookies
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from portfolio_cms.domain.invariants.exceptions import InvariantViolation, SlugConflict
from portfolio_cms.extensions import db


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(SlugConflict)
    def handle_slug_conflict(error):
        return jsonify({"message": str(error)}), 409

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # The public site renders its own pages
        if not request.path.startswith("/api/"):
            return error

        return jsonify({"message": error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    @app.errorhandler(OSError)
    def handle_storage_error(error):
        db.session.rollback()
        current_app.logger.exception(f"{request.method} {request.path} failed")
        return jsonify({"error": str(error)}), 500


def register_jwt_handlers(jwt):
    """401 answers for missing, tampered and expired session tokens."""

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"message": "Unauthorized: No token provided"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        current_app.logger.warning(f"Rejected session token: {reason}")
        response = jsonify({"message": "Unauthorized: Invalid token"})
        unset_jwt_cookies(response)
        return response, 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        response = jsonify({"message": "Unauthorized: Invalid token"})
        unset_jwt_cookies(response)
        return response, 401
