import logging
import os
import click
from flask import Flask, current_app, send_file, send_from_directory
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api import api_bp
from .site import site_bp
from .middleware.request_logging import request_logging
from .errors import register_error_handlers, register_jwt_handlers
from flask_swagger_ui import get_swaggerui_blueprint


def create_app(config_name: str = "development", overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"].upper(), logging.INFO))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    register_jwt_handlers(jwt)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    request_logging(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(site_bp)
    register_error_handlers(app)

    # -------------------------------------------------
    # Uploaded files (PUBLIC)
    # -------------------------------------------------
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploads")
    def serve_upload(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/cms.yaml", methods=["GET"], endpoint="openapi_cms")
    def serve_openapi():
        spec_path = os.path.join(current_app.root_path, "api", "cms_openapi.yaml")

        if not os.path.exists(spec_path):
            raise FileNotFoundError("cms_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/cms.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Portfolio CMS API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # -------------------------------------------------
    # Database bootstrap
    # -------------------------------------------------
    from .application.cms.seed_pages import seed_pages

    with app.app_context():
        db.create_all()
        created = seed_pages()
        if created:
            app.logger.info(f"Seeded {created} default page(s)")

    @app.cli.command("seed-pages")
    def seed_pages_command():
        """Insert the default home/about/contact pages that are missing."""
        click.echo(f"Created {seed_pages()} page(s)")

    return app
