"""Shared fixtures for the Money Plant API tests."""

import pytest

from money_plant import create_app
from money_plant import db


@pytest.fixture
def app(tmp_path):
    """App wired to a throwaway SQLite file per test."""
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    app = create_app({
        "TESTING": True,
        "DB_PATH": str(tmp_path / "test.db"),
        "UPLOAD_FOLDER": str(uploads),
        "JWT_SECRET_KEY": "test-secret-key-that-is-long-enough-for-hs256",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def count_rows(app):
    """Count rows in a table directly, bypassing the API."""
    def _count(table):
        with app.app_context():
            return db.query_db(f"SELECT COUNT(*) AS n FROM {table}", one=True)["n"]
    return _count


@pytest.fixture
def seed_spending(app):
    """Insert MoneySpending rows with explicit dates; returns their ids."""
    def _seed(rows):
        ids = []
        with app.app_context():
            for amount, category, user_id, when in rows:
                row_id, _ = db.execute_db(
                    "INSERT INTO MoneySpending (amount, category, description, payment_method, user_id, transaction_date) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (amount, category, "seeded", "cash", user_id, when.strftime("%Y-%m-%d %H:%M:%S")),
                )
                ids.append(row_id)
        return ids
    return _seed
