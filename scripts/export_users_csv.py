#!/usr/bin/env python3
"""
Users to CSV Export Script

Exports the email and signup time of every user to data/csvs/users.csv.
Password hashes are never exported.
"""

import csv
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import load_settings, DATA_DIR
from webapp.services.user_store import create_user_store

COLUMNS = ['email', 'timestamp']


def export_users(store, csv_path):
    """
    Write all users to a CSV file.

    Args:
        store (UserStore): Store to read from
        csv_path (str or Path): Destination file

    Returns:
        int: Number of rows written
    """
    records = store.load()
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    with open(csv_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(COLUMNS)
        for record in records:
            writer.writerow([record.get(column, '') for column in COLUMNS])

    return len(records)


def main():
    """Main function to export users to CSV."""
    print("📊 Users to CSV Export Tool")
    print("=" * 40)

    settings = load_settings()
    csv_path = DATA_DIR / "csvs" / "users.csv"

    try:
        store = create_user_store(settings)
        count = export_users(store, csv_path)
    except Exception as e:
        print(f"❌ Error during export: {e}")
        return 1

    print(f"✅ Exported {count} users from the {settings['USER_STORE']} store to {csv_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
