"""Initialize the Flask app and its extensions."""

import os

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .badges.store import BadgeStore
from .errors import PersistenceError
from .uploads.relay import DEFAULT_TIMEOUT, IMGBB_UPLOAD_URL, UploadRelay


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(
        __name__,
        instance_relative_config=True,
        static_folder="static",
        static_url_path="/static",
    )

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        PORT=int(os.environ.get("PORT") or 4000),
        IMGBB_API_KEY=os.environ.get("IMGBB_API_KEY") or "",
        IMGBB_UPLOAD_URL=os.environ.get("IMGBB_UPLOAD_URL") or IMGBB_UPLOAD_URL,
        UPLOAD_TIMEOUT=float(os.environ.get("UPLOAD_TIMEOUT") or DEFAULT_TIMEOUT),
        BADGES_FILE=os.environ.get("BADGES_FILE")
        or os.path.join(app.instance_path, "badges.json"),
    )

    if test_config:
        app.config.update(test_config)

    if not app.config["IMGBB_API_KEY"]:
        app.logger.warning("IMGBB_API_KEY is not set; image uploads will fail.")

    # Ensure the instance folder exists
    try:
        os.makedirs(app.instance_path)
    except OSError:
        pass

    store = BadgeStore(app.config["BADGES_FILE"])
    try:
        if store.ensure_exists():
            app.logger.info(f"Created empty badges file at {store.path}")
    except PersistenceError as e:
        app.logger.error(f"Could not create badges file at {store.path}: {e}")
    app.extensions["badge_store"] = store
    app.extensions["upload_relay"] = UploadRelay(
        app.config["IMGBB_API_KEY"],
        endpoint=app.config["IMGBB_UPLOAD_URL"],
        timeout=app.config["UPLOAD_TIMEOUT"],
    )

    # Keep users in the order they were first added
    app.json.sort_keys = False

    # Register blueprints
    from . import main as main_bp

    app.register_blueprint(main_bp.bp)

    from . import badges as badges_bp

    app.register_blueprint(badges_bp.bp)

    from . import uploads as uploads_bp

    app.register_blueprint(uploads_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
