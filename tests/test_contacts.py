"""Tests for the contact form endpoints."""

import sqlite3

import pytest

from money_plant import db


def test_post_contact_inserts_row(client, count_rows):
    resp = client.post("/contact", json={"name": "Asha", "email": "asha@example.com", "message": "Hi"})

    assert resp.status_code == 200
    assert resp.get_json() == {"status": 200, "message": "Contact details inserted successfully"}
    assert count_rows("ContactUs") == 1


def test_post_contact_accepts_form_body(client):
    client.post("/contact", data={"name": "Ravi", "email": "ravi@example.com", "message": "Form"})

    data = client.get("/contacts").get_json()["data"]
    assert data[0]["name"] == "Ravi"
    assert data[0]["email_id"] == "ravi@example.com"
    assert data[0]["message"] == "Form"


@pytest.mark.parametrize("n", [0, 1, 5])
def test_get_contacts_returns_exactly_n_records(client, n):
    for i in range(n):
        client.post("/contact", json={"name": f"user{i}", "email": f"u{i}@example.com", "message": "m"})

    resp = client.get("/contacts")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == 200
    assert len(body["data"]) == n
    assert [c["name"] for c in body["data"]] == [f"user{i}" for i in range(n)]


def test_get_contacts_database_error_returns_500(client, monkeypatch):
    def broken(*args, **kwargs):
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(db, "query_db", broken)
    resp = client.get("/contacts")

    assert resp.status_code == 500
    assert resp.get_json() == {"status": 500, "message": "Failed to fetch from ContactUs table"}


def test_post_contact_database_error_returns_500(client, monkeypatch):
    def broken(*args, **kwargs):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(db, "execute_db", broken)
    resp = client.post("/contact", json={"name": "x", "email": "x@example.com", "message": "x"})

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Failed to insert into ContactUs table"
