"""Tests for the maintenance scripts."""

import csv
import json

from config.database import backup_database, create_db_engine, init_database
from scripts.export_users_csv import export_users
from scripts.import_users_to_database import import_users
from scripts.migrate_plaintext_passwords import migrate_passwords
from webapp.services import auth_service
from webapp.services.auth_service import verify_password


def test_init_database_creates_users_table(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'users.db'}")
    assert "users" in init_database(engine)
    engine.dispose()


def test_backup_database(tmp_path, users_file):
    users_file.write_text("[]")
    backup_path = backup_database(users_file, tmp_path / "backups")
    assert backup_path is not None
    assert open(backup_path).read() == "[]"


def test_backup_missing_file(tmp_path):
    assert backup_database(tmp_path / "missing.json", tmp_path / "backups") is None


def test_migrate_passwords(users_file, json_store):
    users_file.write_text(json.dumps([
        {"email": "old@example.com", "password": "hunter2", "timestamp": "2023-01-01T00:00:00.000Z"},
        {"email": "empty@example.com", "password": "", "timestamp": "2023-01-01T00:00:00.000Z"},
    ]))
    auth_service.signup(json_store, "new@example.com", "pw", rounds=4)

    migrated, skipped = migrate_passwords(users_file, rounds=4)
    assert (migrated, skipped) == (1, 2)

    old = json_store.find_by_email("old@example.com")
    assert "password" not in old
    assert verify_password("hunter2", old["password_hash"])
    assert auth_service.login(json_store, "old@example.com", "hunter2")


def test_migrate_is_idempotent(users_file):
    users_file.write_text(json.dumps([
        {"email": "old@example.com", "password": "hunter2", "timestamp": "2023-01-01T00:00:00.000Z"},
    ]))
    migrate_passwords(users_file, rounds=4)
    assert migrate_passwords(users_file, rounds=4) == (0, 1)


def test_import_users(json_store, sql_store, users_file):
    auth_service.signup(json_store, "ada@example.com", "pw", rounds=4)
    auth_service.signup(json_store, "bob@example.com", "pw", rounds=4)
    auth_service.signup(sql_store, "bob@example.com", "other", rounds=4)

    records = json_store.load()
    records.append({"email": "legacy@example.com", "password": "plain", "timestamp": "2023-01-01T00:00:00.000Z"})
    json_store.save(records)

    assert import_users(json_store, sql_store) == (1, 2)
    assert sql_store.count() == 2
    assert auth_service.login(sql_store, "ada@example.com", "pw")
    # existing rows are left alone
    assert auth_service.login(sql_store, "bob@example.com", "other")


def test_export_users(tmp_path, json_store):
    auth_service.signup(json_store, "ada@example.com", "pw", rounds=4)
    auth_service.signup(json_store, "bob@example.com", "pw", rounds=4)

    csv_path = tmp_path / "csvs" / "users.csv"
    assert export_users(json_store, csv_path) == 2

    with open(csv_path, newline='') as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["email", "timestamp"]
    assert [row[0] for row in rows[1:]] == ["ada@example.com", "bob@example.com"]
    assert "$2b$" not in csv_path.read_text()


def test_migrate_removes_leftover_plain_password(users_file, json_store):
    users_file.write_text(json.dumps([
        {"email": "a@example.com", "password": "hunter2", "password_hash": "$2b$04$x",
         "timestamp": "2023-01-01T00:00:00.000Z"},
    ]))

    assert migrate_passwords(users_file, rounds=4) == (0, 1)
    assert "hunter2" not in users_file.read_text()
    assert json_store.find_by_email("a@example.com") == {
        "email": "a@example.com", "password_hash": "$2b$04$x", "timestamp": "2023-01-01T00:00:00.000Z"
    }
