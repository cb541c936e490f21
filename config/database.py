"""
Database Configuration and Management (SQLAlchemy)

Handles engine creation, sessions, initialization and backups for the SQL user store.
"""

import shutil
import logging
from pathlib import Path
from datetime import datetime
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker
from config.models import Base

logger = logging.getLogger(__name__)


def create_db_engine(database_url):
    """
    Create a SQLAlchemy engine, making sure the SQLite data directory exists.

    Args:
        database_url (str): SQLAlchemy database URL

    Returns:
        sqlalchemy.engine.Engine: Database engine
    """
    if database_url.startswith("sqlite:///"):
        db_path = database_url[len("sqlite:///"):]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, echo=False)


def create_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(engine):
    """
    Initialize the database with all required tables.

    Args:
        engine (sqlalchemy.engine.Engine): Database engine

    Returns:
        list: Names of the tables present after initialization
    """
    logger.info("Initializing database...")

    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise

    tables = inspect(engine).get_table_names()
    logger.info(f"Database initialized with tables: {', '.join(tables)}")
    return tables


def backup_database(source_path, backup_dir):
    """
    Create a timestamped copy of a store file (SQLite database or users JSON).

    Args:
        source_path (str or Path): File to back up
        backup_dir (str or Path): Directory that receives the copy

    Returns:
        str or None: Path of the backup, None if nothing was copied
    """
    source_path = Path(source_path)
    if not source_path.exists():
        logger.warning(f"{source_path} does not exist, cannot create backup")
        return None

    backup_dir = Path(backup_dir)
    backup_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = backup_dir / f"{source_path.stem}_backup_{timestamp}{source_path.suffix}"

    try:
        shutil.copy2(source_path, backup_path)
        logger.info(f"Backed up {source_path.name} to: {backup_path}")
        return str(backup_path)
    except OSError as e:
        logger.error(f"Error creating backup: {e}")
        return None
