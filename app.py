# app.py

import os
os.environ.setdefault("FLASK_APP", __name__)

# Flask
from flask import Flask, jsonify
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from extensions import db, login_manager

from dotenv import load_dotenv
load_dotenv()

# Import Models
import models  # noqa: F401  (registers tables with SQLAlchemy)

# Import Blueprints
from middleware.auth import auth_bp
from routes.catalog import catalog_bp
from routes.chat import chat_bp
from routes.storage import uploads_bp

# Import Configurations
from config.settings import Config

# Data store + provider
from storage import init_store
from storage.sample_data import seed_catalog
from controllers.chat import CLIENT_KEY
from controllers.users import ensure_admin
from utils.gemini_client import GeminiClient


def handle_http_error(exc):
    """Render every HTTP error as JSON ``{"message": ...}``."""
    body = {"message": exc.description or exc.name}
    if isinstance(exc.description, dict):
        body = dict(exc.description)
        body.setdefault("message", exc.name)
    response = jsonify(body)
    response.status_code = exc.code
    return response


def create_app(config_object=Config, store=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SESSION_SECRET (or SECRET_KEY) must be set to sign sessions")

    # Bind database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)
    login_manager.init_app(app)

    with app.app_context():
        if app.config.get("STORAGE_BACKEND") == "sql" and store is None:
            db.create_all()
        store = init_store(app, store)

        if app.config.get("SEED_SAMPLE_DATA"):
            created = seed_catalog(store)
            if created:
                app.logger.info("🌱 Seeded %d sample devices", created)

        if app.config.get("ADMIN_USERNAME") and app.config.get("ADMIN_PASSWORD"):
            admin = ensure_admin(store,
                                 app.config["ADMIN_USERNAME"],
                                 app.config["ADMIN_PASSWORD"],
                                 app.config.get("ADMIN_DISPLAY_NAME", "Workshop Admin"))
            if admin:
                app.logger.info("👤 Created admin user %s", admin.username)

    # Language-model provider
    client = GeminiClient.from_config(app.config)
    if not client.configured:
        app.logger.warning("GEMINI_API_KEY not set. Chat replies will use the fallback message.")
    app.extensions[CLIENT_KEY] = client

    # JSON errors
    app.register_error_handler(HTTPException, handle_http_error)

    # Register Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(uploads_bp)

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.environ.get("PORT", 5000)))
