from flask import Flask
from bebe_care.extensions import db, cors, migrate
from bebe_care.routes import register_routes
from bebe_care.utils.db import enforce_sqlite_foreign_keys

def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)
    with app.app_context():
        enforce_sqlite_foreign_keys(db.engine)

    # Model modules must be imported so metadata knows every table
    from bebe_care import models  # noqa: F401

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    origins = app.config.get("CORS_ORIGINS", "*")
    cors.init_app(app,
                  origins=origins if origins == "*" else [o.strip() for o in origins.split(",")],
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    register_routes(app)

    return app
