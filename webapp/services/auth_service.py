"""
Authentication Service

Signup and login over a user store, plus password hashing.
"""

import hmac
import base64
import hashlib
import logging
from datetime import datetime

import bcrypt
import pytz

from webapp.errors import ValidationError, DuplicateUserError, AuthenticationError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12


def _prehash(password):
    # bcrypt only looks at the first 72 bytes
    digest = hashlib.sha256(password.encode('utf-8', 'surrogatepass')).digest()
    return base64.b64encode(digest)


def hash_password(password, rounds=DEFAULT_ROUNDS):
    """
    Create a salted bcrypt hash of a password.

    Args:
        password (str): Plain-text password
        rounds (int): bcrypt cost factor

    Returns:
        str: Hash suitable for storage
    """
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(password, password_hash):
    """
    Check a password against a stored hash.

    Returns:
        bool: True if the password matches, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode('utf-8'))
    except (ValueError, TypeError, AttributeError):
        return False


def utc_timestamp():
    """Current time as ISO-8601 UTC with milliseconds, e.g. 2024-05-01T12:00:00.123Z"""
    now = datetime.now(pytz.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _require_credentials(email, password):
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError()


def _matches(record, password):
    if 'password_hash' in record:
        return verify_password(password, record['password_hash'])

    legacy = record.get('password')
    if isinstance(legacy, str):
        logger.warning(f"User {record.get('email')} still has a plain-text password; run the migration script")
        return hmac.compare_digest(legacy.encode('utf-8', 'surrogatepass'), password.encode('utf-8', 'surrogatepass'))

    return False


def signup(store, email, password, rounds=DEFAULT_ROUNDS):
    """
    Register a new user.

    Args:
        store (UserStore): Where users are kept
        email (str): Email address, the unique key (case-sensitive)
        password (str): Plain-text password, stored only as a hash
        rounds (int): bcrypt cost factor

    Returns:
        dict: The stored record

    Raises:
        ValidationError: email or password missing
        DuplicateUserError: email already registered
    """
    _require_credentials(email, password)

    if store.find_by_email(email) is not None:
        logger.warning(f"Signup rejected, user already exists: {email}")
        raise DuplicateUserError()

    record = {
        'email': email,
        'password_hash': hash_password(password, rounds),
        'timestamp': utc_timestamp()
    }
    store.add(record)
    logger.info(f"Created user: {email}")
    return record


def login(store, email, password):
    """
    Validate a user's credentials.

    Unknown email and wrong password are reported the same way.

    Returns:
        dict: The matching record

    Raises:
        ValidationError: email or password missing
        AuthenticationError: no matching email/password
    """
    _require_credentials(email, password)

    record = store.find_by_email(email)
    if record is None or not _matches(record, password):
        logger.warning(f"Failed login for {email}")
        raise AuthenticationError()

    logger.info(f"User logged in: {email}")
    return record
