# money_plant/app.py
import logging

from flask import Flask, send_from_directory
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from . import db
from .auth import auth_bp
from .config import Config
from .contacts import bp as contacts_bp
from .errors import register_error_handlers
from .goals import bp as goals_bp
from .helpers import RowIdConverter, api_response
from .reports import bp as reports_bp
from .transactions import bp as transactions_bp

logger = logging.getLogger("money-plant")


# ---------------- Flask App Factory ----------------
def create_app(overrides=None):
    app = Flask(__name__)

    # Configuration
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # int ids that sqlite can bind; larger ones 404
    app.url_map.converters["row_id"] = RowIdConverter

    JWTManager(app)

    # CORS is fully open
    CORS(app, resources={r"/*": {"origins": "*"}}, send_wildcard=True,
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"])

    # Blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(contacts_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(goals_bp)
    register_error_handlers(app)

    # Initialize DB
    db.init_db(app.config["DB_PATH"])
    logger.info(f"Database initialized at {app.config['DB_PATH']}")

    app.teardown_appcontext(db.close_db)

    # ---------------- Core Endpoints ----------------
    @app.route('/health')
    def health():
        return api_response(200, "ok")

    @app.route('/uploads/<path:filename>')
    def uploads(filename):
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    return app


# ---------------- Run ----------------
if __name__ == '__main__':
    app = create_app()
    port = app.config["PORT"]
    logger.info(f"Server running on port {port}")
    app.run(host="0.0.0.0", port=port)
