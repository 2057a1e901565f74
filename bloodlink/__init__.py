import logging

from flask import Flask, jsonify

from bloodlink.config import Config
from bloodlink.extensions import db, migrate, cors

# Import controllers (blueprints) for each module
from bloodlink.controllers.blood_request_controller import blood_request_bp
from bloodlink.controllers.donor_match_controller import donor_match_bp


def create_app(config_object=None):
    """Flask application factory"""
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    log_level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app.logger.setLevel(log_level)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app)

    # Register Blueprints; matching lives under the blood request resource
    app.register_blueprint(blood_request_bp, url_prefix='/api/v1/blood_requests')
    app.register_blueprint(donor_match_bp, url_prefix='/api/v1/blood_requests')

    @app.route('/health', methods=['GET'])
    def healthcheck():
        return jsonify({'status': 'ok'}), 200

    return app
