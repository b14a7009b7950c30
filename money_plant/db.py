# money_plant/db.py
import logging
import os
import sqlite3

from flask import current_app, g

logger = logging.getLogger("money-plant.db")

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), "init_db.sql")


def _connect(db_path):
    # ensure directory exists
    os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def get_db():
    db = getattr(g, '_database', None)
    if db is None:
        db = g._database = _connect(current_app.config["DB_PATH"])
    return db


def close_db(exception=None):
    db = g.pop('_database', None)
    if db is not None:
        try:
            db.close()
        except sqlite3.Error:
            logger.exception("Error closing DB connection")


def query_db(query, args=(), one=False):
    cur = get_db().execute(query, args)
    rv = cur.fetchall()
    cur.close()
    return (rv[0] if rv else None) if one else rv


def execute_db(query, args=()):
    """Run a write statement and return (lastrowid, rowcount)."""
    conn = get_db()
    cur = conn.cursor()
    try:
        cur.execute(query, args)
        conn.commit()
    except sqlite3.Error:
        conn.rollback()
        raise
    finally:
        last, affected = cur.lastrowid, cur.rowcount
        cur.close()
    return last, affected


def init_db(db_path):
    """
    Create the tables from init_db.sql located next to this module.
    Idempotent (IF NOT EXISTS everywhere) so it is safe to call at app startup.
    """
    if not os.path.exists(SCHEMA_FILE):
        raise FileNotFoundError(f"init_db.sql not found at expected path: {SCHEMA_FILE}")

    conn = _connect(db_path)
    try:
        with open(SCHEMA_FILE, 'r', encoding='utf-8') as f:
            conn.executescript(f.read())
        conn.commit()
    finally:
        conn.close()
