from flask import current_app, jsonify, request
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies
from portfolio_cms.application.auth.session import AuthError, login as issue_token
from portfolio_cms.utils.decorators import admin_required
from . import api_bp


@api_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "message": "Invalid request body"}), 400

    username = data.get("username")
    password = data.get("password")

    if username is None or password is None:
        return jsonify({"success": False, "message": "Username and password required"}), 400

    try:
        token = issue_token(username, password)
    except AuthError:
        current_app.logger.warning(f"Failed login attempt for '{username}'")
        return jsonify({"success": False, "message": "Invalid credentials"}), 401

    response = jsonify({"success": True, "message": "Logged in successfully"})
    set_access_cookies(response, token)
    return response, 200


@api_bp.route("/logout", methods=["POST"])
def logout():
    response = jsonify({"success": True, "message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@api_bp.route("/verify", methods=["GET"])
@admin_required
def verify():
    return jsonify({"success": True, "message": "Token is valid"}), 200
