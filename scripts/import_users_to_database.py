#!/usr/bin/env python3
"""
Import Script: Copy users from the JSON file into the SQL store
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import create_db_engine
from config.settings import load_settings
from webapp.errors import DuplicateUserError
from webapp.services.user_store import JsonFileUserStore, SqlUserStore


def import_users(source, target):
    """
    Copy records from one store into another.

    Records without a password hash (run the migration script first) and
    emails already present in the target are skipped.

    Args:
        source (UserStore): Store to read from
        target (UserStore): Store to add to

    Returns:
        tuple: (imported, skipped) counts
    """
    imported_count = 0
    skipped_count = 0

    for record in source.load():
        email = record.get('email')
        if not email or 'password_hash' not in record or 'timestamp' not in record:
            print(f"{email}: Incomplete record - skipping")
            skipped_count += 1
            continue

        try:
            target.add({
                'email': email,
                'password_hash': record['password_hash'],
                'timestamp': record['timestamp']
            })
        except DuplicateUserError:
            print(f"{email}: Already in database - skipping")
            skipped_count += 1
            continue

        imported_count += 1

    return imported_count, skipped_count


def main():
    settings = load_settings()
    print("📥 Importing users into the database")
    print("=" * 40)

    source = JsonFileUserStore(settings['USERS_FILE'])
    target = SqlUserStore(create_db_engine(settings['DATABASE_URL']))

    try:
        imported, skipped = import_users(source, target)
    except Exception as e:
        print(f"❌ Import failed: {e}")
        return 1

    print(f"\nImported: {imported} users")
    print(f"Skipped: {skipped} users")
    return 0


if __name__ == "__main__":
    sys.exit(main())
