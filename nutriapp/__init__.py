import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from config import engine_options
from nutriapp.extensions import db, cors, migrate
from nutriapp.gateway.registry import init_gateways
from nutriapp.routes import register_routes
from nutriapp.utils.http import error


def _register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(_e):
        return error("NOT_FOUND", "Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return error("METHOD_NOT_ALLOWED", "Method not allowed", 405)

    @app.errorhandler(HTTPException)
    def http_error(e):
        return error(e.name.upper().replace(" ", "_"), e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def unhandled(e):
        app.logger.exception("Unhandled error: %s", e)
        return error("UNKNOWN_ERROR", "An unexpected error occurred", 500)


def create_app(config_overrides=None, backend=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)
        if "SQLALCHEMY_DATABASE_URI" in config_overrides and "SQLALCHEMY_ENGINE_OPTIONS" not in config_overrides:
            app.config["SQLALCHEMY_ENGINE_OPTIONS"] = engine_options(app.config["SQLALCHEMY_DATABASE_URI"])

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    from nutriapp import models  # noqa: F401
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=[app.config.get("CORS_ORIGIN", "http://localhost:4200")],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    init_gateways(app, backend=backend)
    register_routes(app)
    _register_error_handlers(app)

    return app
