"""
Authentication Routes

Handles user registration and login.
"""

from flask import Blueprint, current_app, request

from webapp.errors import AuthError
from webapp.services import auth_service

auth_bp = Blueprint('auth', __name__)


def get_credentials():
    """
    Pull email and password out of a JSON or form-encoded body.

    Returns:
        tuple: (email, password), either may be None
    """
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.form
    return data.get('email'), data.get('password')


@auth_bp.errorhandler(AuthError)
def handle_auth_error(error):
    return error.message, error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create a new user from an email/password pair."""
    email, password = get_credentials()
    auth_service.signup(
        current_app.extensions['user_store'],
        email,
        password,
        rounds=current_app.config['BCRYPT_ROUNDS']
    )
    return 'Signup successful!', 200, {'Content-Type': 'text/plain; charset=utf-8'}


@auth_bp.route('/login', methods=['POST'])
def login():
    """Check an email/password pair against the stored users."""
    email, password = get_credentials()
    auth_service.login(current_app.extensions['user_store'], email, password)
    return 'Login successful!', 200, {'Content-Type': 'text/plain; charset=utf-8'}
