import pytest

from payroll_portal.main import create_app


@pytest.fixture
def client():
    app = create_app("payroll_portal.config.testing")
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def token(client):
    resp = client.post("/api/register", json={"id": "emp001", "name": "Rahim", "password": "secret1"})
    return resp.get_json()["token"]


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "message": "Server is running"}


def test_path_parameter_form(client):
    resp = client.get("/", query_string={"path": "health"})
    assert resp.get_json()["ok"] is True


def test_form_encoded_login(client, token):
    resp = client.post("/api/login", data={"id": "emp001", "password": "secret1"})

    assert resp.status_code == 200
    assert resp.get_json()["token"]


def test_unauthenticated_request_gets_401(client):
    resp = client.get("/api/profile")

    assert resp.status_code == 401
    assert resp.get_json()["ok"] is False


def test_token_in_header_or_parameter(client, token):
    by_header = client.get("/api/profile", headers={"Authorization": f"Bearer {token}"})
    by_param = client.get("/", query_string={"path": "profile", "authorization": f"Bearer {token}"})

    assert by_header.get_json()["profile"] == {"id": "emp001", "profileComplete": False}
    assert by_param.get_json() == by_header.get_json()


def test_record_and_read_stats(client, token, profile_fields):
    headers = {"Authorization": f"Bearer {token}"}
    client.post("/api/profile/setup", json=profile_fields, headers=headers)

    resp = client.post("/api/attendance/absent", json={"date": "2025-11-04", "reason": "Fever"}, headers=headers)
    assert resp.get_json()["record"]["deduction"] == 300.0

    stats = client.get("/api/attendance/stats", query_string={"month": "2025-11"}, headers=headers).get_json()
    assert stats["stats"]["absentDays"] == 1
    assert stats["stats"]["presentBonus"] == 0

    summary = client.get("/api/attendance/summary", query_string={"month": "2025-11"}, headers=headers).get_json()
    assert summary["summary"]["netAfterDeduction"] == 14700.0


def test_unknown_endpoint_is_404(client, token):
    resp = client.get("/api/nothing", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 404


def test_numeric_json_password_is_accepted(client):
    resp = client.post("/api/register", json={"id": "emp009", "name": "N", "password": 1234567})
    assert resp.status_code == 200
    assert resp.get_json()["ok"] is True

    login = client.post("/api/login", json={"id": "emp009", "password": 1234567})
    assert login.get_json()["ok"] is True

    short = client.post("/api/register", json={"id": "emp010", "name": "N", "password": 123})
    assert (short.status_code, short.get_json()["ok"]) == (200, False)
