#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the SQL user store and back up any existing store files.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import create_db_engine, init_database, backup_database
from config.settings import load_settings, DATA_DIR

BACKUP_DIR = DATA_DIR / "backups"


def main():
    """Initialize the database and back up the existing store files."""
    settings = load_settings()
    print("🚀 Initializing User Database...")
    print("=" * 50)

    try:
        for store_file in (settings['USERS_FILE'], settings['DATABASE_URL'].replace("sqlite:///", "")):
            backup_path = backup_database(store_file, BACKUP_DIR)
            if backup_path:
                print(f"✅ Backup created: {backup_path}")

        engine = create_db_engine(settings['DATABASE_URL'])
        tables = init_database(engine)
        print("✅ Database initialized successfully!")

        print("\n📊 Database Structure:")
        for table in tables:
            print(f"   - {table}")

        print("\n🎯 Set USER_STORE=sql to serve users from the database.")
        return 0

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
