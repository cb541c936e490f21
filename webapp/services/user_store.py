"""
User Store

Persistence for user records. Two backends share the same interface:
a flat JSON file rewritten on every change, and a SQL table via SQLAlchemy.
"""

import os
import json
import logging
import tempfile
from pathlib import Path
from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError

from config.database import create_db_engine, create_session_factory, init_database
from config.models import User
from webapp.errors import DuplicateUserError

logger = logging.getLogger(__name__)


class UserStore:
    """Interface shared by the store backends."""

    name = None

    def load(self):
        raise NotImplementedError

    def save(self, records):
        raise NotImplementedError

    def find_by_email(self, email):
        raise NotImplementedError

    def add(self, record):
        raise NotImplementedError

    def count(self):
        return len(self.load())


class JsonFileUserStore(UserStore):
    """
    Users kept as a JSON array in a single file.

    Every call reads the file from disk and every mutation rewrites it whole.
    There is no locking, so concurrent writers can lose updates.
    """

    name = 'json'

    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        """
        Read all records from the file.

        Returns:
            list: User records, empty if the file is missing or unreadable
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.error(f"Error reading {self.path}: expected a JSON array, got {type(data).__name__}")
            return []

        records = [record for record in data if isinstance(record, dict)]
        if len(records) != len(data):
            logger.warning(f"Ignoring {len(data) - len(records)} non-object entries in {self.path}")
        return records

    def save(self, records):
        """
        Overwrite the file with the given records.

        The data goes to a temporary file first and is renamed into place.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(list(records), f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def find_by_email(self, email):
        return next((record for record in self.load() if record.get('email') == email), None)

    def add(self, record):
        records = self.load()
        if any(existing.get('email') == record['email'] for existing in records):
            raise DuplicateUserError()
        records.append(record)
        self.save(records)


class SqlUserStore(UserStore):
    """Users kept in the `users` table, with a unique index on email."""

    name = 'sql'

    def __init__(self, engine):
        self.engine = engine
        self.Session = create_session_factory(engine)
        init_database(engine)

    def load(self):
        session = self.Session()
        try:
            users = session.execute(select(User).order_by(User.user_id)).scalars().all()
            return [user.to_record() for user in users]
        finally:
            session.close()

    def save(self, records):
        """Replace every row with the given records in a single transaction."""
        session = self.Session()
        try:
            session.execute(delete(User))
            for record in records:
                session.add(User(
                    email=record['email'],
                    password_hash=record['password_hash'],
                    timestamp=record['timestamp']
                ))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def find_by_email(self, email):
        session = self.Session()
        try:
            user = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
            return user.to_record() if user else None
        finally:
            session.close()

    def add(self, record):
        session = self.Session()
        try:
            session.add(User(
                email=record['email'],
                password_hash=record['password_hash'],
                timestamp=record['timestamp']
            ))
            session.commit()
        except IntegrityError:
            session.rollback()
            raise DuplicateUserError()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def count(self):
        session = self.Session()
        try:
            return session.execute(select(func.count(User.user_id))).scalar_one()
        finally:
            session.close()


def create_user_store(config):
    """
    Build the store selected by the USER_STORE setting.

    Args:
        config (Mapping): Settings with USER_STORE, USERS_FILE and DATABASE_URL

    Returns:
        UserStore: The configured store
    """
    backend = config['USER_STORE']
    if backend == 'json':
        return JsonFileUserStore(config['USERS_FILE'])
    if backend == 'sql':
        return SqlUserStore(create_db_engine(config['DATABASE_URL']))
    raise ValueError(f"Unknown user store backend: {backend}")
