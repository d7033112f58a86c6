import pytest

from payroll_portal.api.dispatcher import Dispatcher, Router
from payroll_portal.api.rate_limit import RateLimiter
from payroll_portal.api.routes import build_dispatcher
from payroll_portal.core import messages
from payroll_portal.core.exceptions import ValidationError


@pytest.fixture
def dispatcher(container):
    return build_dispatcher(container)


@pytest.fixture
def token(dispatcher):
    result = dispatcher.dispatch("POST", "register", {"id": "emp001", "name": "Rahim", "password": "secret1"})
    assert result.ok
    return result.body["token"]


def _auth(token):
    return f"Bearer {token}"


def test_health_is_public(dispatcher):
    result = dispatcher.dispatch("GET", "health")

    assert result.status_code == 200
    assert result.body == {"ok": True, "message": messages.SERVER_RUNNING}


def test_unknown_route_is_404(dispatcher, token):
    result = dispatcher.dispatch("GET", "attendance/unknown", {}, _auth(token))

    assert result.status_code == 404
    assert result.body == {"ok": False, "error": messages.ROUTE_NOT_FOUND}


def test_method_is_part_of_the_route(dispatcher, token):
    assert dispatcher.dispatch("GET", "attendance/present", {}, _auth(token)).status_code == 404


def test_protected_route_needs_token(dispatcher):
    missing = dispatcher.dispatch("GET", "profile")
    bad = dispatcher.dispatch("GET", "profile", {}, "Bearer nope")

    assert (missing.status_code, missing.body["error"]) == (401, messages.TOKEN_REQUIRED)
    assert (bad.status_code, bad.body["error"]) == (401, messages.TOKEN_INVALID)


def test_validation_errors_are_ok_false_with_200(dispatcher):
    result = dispatcher.dispatch("POST", "register", {"id": "emp001", "name": "Rahim"})

    assert result.status_code == 200
    assert result.body == {"ok": False, "error": messages.ALL_FIELDS_REQUIRED}


def test_wrong_login_is_ok_false(dispatcher, token):
    result = dispatcher.dispatch("POST", "login", {"id": "emp001", "password": "nope-nope"})

    assert result.status_code == 200
    assert result.body["error"] == messages.WRONG_CREDENTIALS


def test_missing_profile_is_404(dispatcher, token):
    result = dispatcher.dispatch("POST", "attendance/present", {"date": "2025-11-23"}, _auth(token))

    assert result.status_code == 404
    assert result.body["error"] == messages.PROFILE_NOT_FOUND


def test_full_month_flow(dispatcher, token, profile_fields):
    auth = _auth(token)

    profile = dispatcher.dispatch("GET", "profile", {}, auth)
    assert profile.body["profile"]["profileComplete"] is False

    saved = dispatcher.dispatch("POST", "profile/setup", profile_fields, auth)
    assert saved.body["message"] == messages.PROFILE_SAVED

    present = dispatcher.dispatch("POST", "attendance/present", {"date": "2025-11-03", "otHours": "5"}, auth)
    assert present.body["message"] == messages.PRESENT_SAVED
    assert present.body["record"]["earned"] == 1050.0

    dispatcher.dispatch("POST", "attendance/offday", {"date": "2025-11-07", "type": "Weekly"}, auth)

    stats = dispatcher.dispatch("GET", "attendance/stats", {"month": "2025-11"}, auth)
    assert stats.body["stats"]["presentDays"] == 1
    assert stats.body["stats"]["presentBonus"] == 500.0

    history = dispatcher.dispatch("GET", "attendance/history", {"month": "2025-11"}, auth)
    assert [r["date"] for r in history.body["records"]] == ["2025-11-07", "2025-11-03"]

    months = dispatcher.dispatch("GET", "attendance/months", {}, auth)
    assert "2025-11" in months.body["months"]

    deleted = dispatcher.dispatch("POST", "attendance/delete", {"date": "2025-11-07"}, auth)
    assert deleted.body == {"ok": True, "message": messages.RECORD_DELETED, "deleted": 1}

    again = dispatcher.dispatch("POST", "attendance/delete", {"date": "2025-11-07"}, auth)
    assert (again.status_code, again.body["error"]) == (404, messages.RECORD_NOT_FOUND)


def test_logout_invalidates_token(dispatcher, token):
    assert dispatcher.dispatch("POST", "logout", {}, _auth(token)).body["message"] == messages.LOGGED_OUT
    assert dispatcher.dispatch("GET", "profile", {}, _auth(token)).status_code == 401


def test_salary_components_route(dispatcher, token):
    result = dispatcher.dispatch("GET", "salary/components", {"gross": "17450"}, _auth(token))
    assert result.body["components"]["basicSalary"] == 10000.0

    low = dispatcher.dispatch("GET", "salary/components", {"gross": "2000"}, _auth(token))
    assert low.body == {"ok": False, "error": messages.GROSS_TOO_LOW}


def test_unexpected_errors_are_masked(container):
    router = Router()

    @router.route("GET", "boom", public=True)
    def boom(req):
        raise RuntimeError("connection refused to db-host:3306")

    @router.route("GET", "safe", public=True)
    def safe(req):
        raise RuntimeError(messages.INVALID_NUMBER)

    dispatcher = Dispatcher(router, container.auth_service)

    result = dispatcher.dispatch("GET", "boom")
    assert result.status_code == 500
    assert result.body == {"ok": False, "error": messages.SERVER_ERROR}

    assert dispatcher.dispatch("GET", "safe").body["error"] == messages.INVALID_NUMBER


def test_domain_errors_keep_their_message(container):
    router = Router()

    @router.route("POST", "fail", public=True)
    def fail(req):
        raise ValidationError("bad input")

    result = Dispatcher(router, container.auth_service).dispatch("POST", "/fail/")
    assert (result.status_code, result.body) == (200, {"ok": False, "error": "bad input"})


def test_rate_limit_is_enforced_per_caller(container):
    router = Router()

    @router.route("GET", "ping", public=True)
    def ping(req):
        return {}

    dispatcher = Dispatcher(router, container.auth_service, rate_limiter=RateLimiter(2))

    assert dispatcher.dispatch("GET", "ping", client_key="10.0.0.1").ok
    assert dispatcher.dispatch("GET", "ping", client_key="10.0.0.1").ok
    limited = dispatcher.dispatch("GET", "ping", client_key="10.0.0.1")
    assert (limited.status_code, limited.body["error"]) == (429, messages.TOO_MANY_REQUESTS)
    assert dispatcher.dispatch("GET", "ping", client_key="10.0.0.2").ok


def test_invalid_tokens_are_counted_by_address(container):
    router = Router()

    @router.route("GET", "me")
    def me(req):
        return {"id": req.user_id}

    dispatcher = Dispatcher(router, container.auth_service, rate_limiter=RateLimiter(2))

    responses = [
        dispatcher.dispatch("GET", "me", {}, f"Bearer junk-{i}", client_key="10.0.0.9") for i in range(3)
    ]
    assert [r.status_code for r in responses] == [401, 401, 429]

    # a valid session has its own budget, separate from its address
    token = container.auth_service.register(user_id="emp001", name="Rahim", password="secret1")
    ok = dispatcher.dispatch("GET", "me", {}, f"Bearer {token}", client_key="10.0.0.9")
    assert (ok.status_code, ok.body["id"]) == (200, "emp001")
