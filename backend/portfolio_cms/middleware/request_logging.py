from flask import request


def request_logging(app):
    @app.before_request
    def log_request():
        app.logger.info(f"{request.method} {request.full_path.rstrip('?')}")
