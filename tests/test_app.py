"""Tests for the service surface: CORS, uploads, health, error envelope."""

from money_plant.init_db_py import main as init_db_main


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": 200, "message": "ok"}


def test_cors_is_open(client):
    resp = client.get("/contacts", headers={"Origin": "http://anywhere.example"})

    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_preflight_is_200(client):
    resp = client.options("/track-records/1", headers={
        "Origin": "http://anywhere.example",
        "Access-Control-Request-Method": "DELETE",
    })

    assert resp.status_code == 200
    assert "DELETE" in resp.headers["Access-Control-Allow-Methods"]


def test_uploads_are_served(app, client):
    with open(f"{app.config['UPLOAD_FOLDER']}/receipt.txt", "w") as f:
        f.write("paid")

    resp = client.get("/uploads/receipt.txt")

    assert resp.status_code == 200
    assert resp.data == b"paid"
    resp.close()


def test_missing_upload_is_404(client):
    resp = client.get("/uploads/missing.png")

    assert resp.status_code == 404
    assert resp.get_json() == {"status": 404, "message": "Not found"}


def test_unknown_route_uses_envelope(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["status"] == 404


def test_wrong_method_uses_envelope(client):
    resp = client.patch("/contacts")

    assert resp.status_code == 405
    assert resp.get_json() == {"status": 405, "message": "Method not allowed"}


def test_init_db_script_creates_tables(tmp_path):
    import sqlite3

    db_path = tmp_path / "nested" / "fresh.db"
    assert init_db_main([str(db_path)]) == 0

    conn = sqlite3.connect(db_path)
    try:
        tables = {r[0] for r in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    finally:
        conn.close()
    assert {"users", "ContactUs", "MoneySpending", "goals"} <= tables


def test_unhandled_error_logs_traceback(app, client, monkeypatch, caplog):
    from money_plant import db

    def broken(*args, **kwargs):
        raise RuntimeError("boom")

    app.config["PROPAGATE_EXCEPTIONS"] = False
    monkeypatch.setattr(db, "query_db", broken)
    with caplog.at_level("ERROR", logger="money-plant.errors"):
        resp = client.get("/contacts")

    assert resp.status_code == 500
    assert resp.get_json() == {"status": 500, "message": "Internal server error"}
    record = next(r for r in caplog.records if r.getMessage() == "Unhandled server error")
    assert record.exc_info is not None
    assert "RuntimeError: boom" in caplog.text
