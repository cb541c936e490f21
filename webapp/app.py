"""
Flask Application Factory

Creates and configures the Flask application instance.
"""

import logging

from flask import Flask, current_app

from config.settings import load_settings
from webapp.routes.auth import auth_bp
from webapp.services.auth_service import utc_timestamp
from webapp.services.user_store import create_user_store

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    """
    Create and configure the Flask application.

    Args:
        test_config (dict, optional): Settings that override the environment

    Returns:
        Flask: Configured application
    """
    settings = load_settings()
    if test_config:
        settings.update(test_config)

    # Public assets are served from the site root, e.g. /index.html
    app = Flask(__name__, static_folder=settings['PUBLIC_DIR'], static_url_path='')
    app.config.update(settings)

    app.extensions['user_store'] = create_user_store(app.config)
    logger.info(f"Using {app.config['USER_STORE']} user store")

    app.register_blueprint(auth_bp)

    @app.route('/')
    def index():
        """Serve the signup/login page."""
        return app.send_static_file('index.html')

    @app.route('/admin/status')
    def status():
        """Health check endpoint for the user store."""
        store = current_app.extensions['user_store']
        try:
            return {
                'status': 'ok',
                'store': store.name,
                'users': store.count(),
                'timestamp': utc_timestamp()
            }
        except Exception as e:
            logger.error(f"Error counting users: {e}")
            return {
                'status': 'error',
                'message': str(e)
            }, 500

    return app
