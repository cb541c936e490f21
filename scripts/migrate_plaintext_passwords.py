#!/usr/bin/env python3
"""
Migration Script: Convert plain-text passwords to bcrypt hashes

Rewrites records in the users JSON file that still carry a plain `password`
field so they carry a `password_hash` instead.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import load_settings
from webapp.services.auth_service import hash_password
from webapp.services.user_store import JsonFileUserStore


def migrate_passwords(users_file, rounds):
    """
    Hash every plain-text password in the users file.

    Args:
        users_file (str or Path): Path to the users JSON file
        rounds (int): bcrypt cost factor

    Returns:
        tuple: (migrated, skipped) counts
    """
    store = JsonFileUserStore(users_file)
    records = store.load()

    migrated_count = 0
    skipped_count = 0
    changed = False

    print(f"Found {len(records)} users to check...")

    for record in records:
        email = record.get('email')

        if 'password_hash' in record:
            if 'password' in record:
                del record['password']
                print(f"{email}: Already hashed - removing leftover plain-text password")
                changed = True
            else:
                print(f"{email}: Already hashed - skipping")
            skipped_count += 1
            continue

        password = record.get('password')
        if not isinstance(password, str) or not password:
            print(f"{email}: No usable password - skipping")
            skipped_count += 1
            continue

        record['password_hash'] = hash_password(password, rounds)
        del record['password']
        print(f"{email}: Migrated")
        migrated_count += 1
        changed = True

    if changed:
        store.save(records)

    return migrated_count, skipped_count


def main():
    """Main migration function."""
    settings = load_settings()
    users_file = settings['USERS_FILE']

    print("🔐 Password Migration Tool")
    print("=" * 40)
    print(f"This will replace plain-text passwords in {users_file} with bcrypt hashes.")
    print("WARNING: This will modify your users file!")
    print()

    response = input("Do you want to continue? (yes/no): ").lower().strip()
    if response != 'yes':
        print("Migration cancelled.")
        return 1

    try:
        migrated, skipped = migrate_passwords(users_file, settings['BCRYPT_ROUNDS'])
    except OSError as e:
        print(f"\n❌ Migration failed: {e}")
        return 1

    print(f"\nMigration complete!")
    print(f"Migrated: {migrated} users")
    print(f"Skipped: {skipped} users")
    return 0


if __name__ == "__main__":
    sys.exit(main())
