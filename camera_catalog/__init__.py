import logging
import os

from flask import Flask, jsonify, redirect, url_for
from dotenv import load_dotenv
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS

load_dotenv()

# sql alchemy instance
db = SQLAlchemy()

# Flask Migrate instance to handle migrations
migrate = Migrate()

jwt = JWTManager()


def create_app(config=None):
    from camera_catalog.config.config import Config

    # declaring flask application
    app = Flask(__name__)

    if config is None:
        config = Config().get(os.environ.get("FLASK_ENV", "development"))
    app.config.from_object(config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Enable CORS for the JSON API only
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # import models to let the migrate tool know
    from camera_catalog.models import Camera  # noqa: F401

    from camera_catalog.storage import init_storage
    storage = init_storage(app)
    app.logger.info(
        "Camera storage backend '%s' ready (features: %s)",
        app.config["DATA_BACKEND"],
        app.config["CAMERA_FEATURES"],
    )

    from camera_catalog.middlewares.auth_middleware import init_auth
    init_auth(app, jwt)

    from camera_catalog.controllers.error_handlers import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from camera_catalog.controllers.cameras_controller import cameras_bp
    from camera_catalog.controllers.api_controller import api_bp

    app.register_blueprint(cameras_bp, url_prefix='/cameras')
    app.register_blueprint(api_bp, url_prefix='/api/cameras')

    if app.config["AUTH_ENABLED"]:
        from camera_catalog.controllers.auth_controller import auth_bp
        app.register_blueprint(auth_bp, url_prefix='/auth')

    @app.route('/')
    def index():
        return redirect(url_for('cameras.list_cameras'))

    @app.route('/health')
    def health():
        return jsonify({'success': True, 'backend': app.config["DATA_BACKEND"]}), 200

    @app.cli.command('init-db')
    def init_db():
        """Create the SQL tables used by the cloudsql backend."""
        storage.init_schema()
        print("Camera tables created.")

    return app
