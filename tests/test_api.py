# tests/test_api.py

"""
Access evaluation endpoints.
"""

import pytest


MANAGER = {"id": "u1", "role": "manager"}
TEAM = [
    {"id": "u2", "role": "agent", "manager_id": "u1"},
    {"id": "u3", "role": "agent", "manager_id": "other"},
]
LEADS = [
    {"id": "l1", "assigned_to": "u1", "name": "Omar", "budget": 1200000},
    {"id": "l2", "assigned_to": "u2", "status": "New"},
    {"id": "l3", "assigned_to": "u3"},
    {"id": "l4", "assigned_to": None},
]


def test_visible_leads_for_manager(client):
    r = client.post(
        "/api/v1/access/leads/visible/",
        {"user": MANAGER, "leads": LEADS, "team_members": TEAM},
        format="json",
    )
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert [lead["id"] for lead in body["data"]] == ["l1", "l2"]
    assert body["meta"] == {"total": 4, "visible": 2}


def test_visible_leads_keep_payload(client):
    r = client.post(
        "/api/v1/access/leads/visible/",
        {"user": {"id": "ceo", "role": "ceo"}, "leads": LEADS},
        format="json",
    )
    assert r.status_code == 200
    first = r.json()["data"][0]
    assert first == {"id": "l1", "assigned_to": "u1", "name": "Omar", "budget": 1200000}
    assert len(r.json()["data"]) == 4


def test_visible_leads_null_user(client):
    r = client.post(
        "/api/v1/access/leads/visible/",
        {"user": None, "leads": LEADS, "team_members": TEAM},
        format="json",
    )
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_unknown_role_is_rejected(client):
    r = client.post(
        "/api/v1/access/leads/visible/",
        {"user": {"id": "x", "role": "viewer"}, "leads": LEADS},
        format="json",
    )
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["errors"][0]["code"] == "validation_error"
    assert "user" in body["errors"][0]["details"]


def test_lead_without_id_is_rejected(client):
    r = client.post(
        "/api/v1/access/leads/visible/",
        {"user": MANAGER, "leads": [{"assigned_to": "u1"}]},
        format="json",
    )
    assert r.status_code == 400


def test_visible_team_for_manager(client):
    members = [MANAGER] + TEAM
    r = client.post("/api/v1/access/team/visible/", {"user": MANAGER, "members": members}, format="json")
    assert r.status_code == 200
    assert [m["id"] for m in r.json()["data"]] == ["u1", "u2"]


@pytest.mark.parametrize(
    "user,action,lead,status,code",
    [
        ({"id": "u2", "role": "agent", "manager_id": "u1"}, "view", {"id": "l2", "assigned_to": "u2"}, 200, None),
        ({"id": "u2", "role": "agent"}, "edit", {"id": "l3", "assigned_to": "u3"}, 403, "lead.edit.forbidden"),
        ({"id": "u2", "role": "agent"}, "delete", {"id": "l2", "assigned_to": "u2"}, 403, "lead.delete.forbidden"),
        ({"id": "a1", "role": "admin"}, "DELETE", {"id": "l3", "assigned_to": "u3"}, 200, None),
        (MANAGER, "edit", {"id": "l2", "assigned_to": "u2"}, 200, None),
        (None, "view", {"id": "l1", "assigned_to": "u1"}, 403, "lead.read.forbidden"),
    ],
)
def test_authorize_lead_action(client, user, action, lead, status, code):
    r = client.post(
        "/api/v1/access/leads/authorize/",
        {"user": user, "action": action, "lead": lead, "team_members": TEAM},
        format="json",
    )
    assert r.status_code == status
    body = r.json()
    if code is None:
        assert body["data"] == {"allowed": True}
    else:
        assert body["errors"][0]["code"] == code
        assert body["meta"]["lead_id"] == lead["id"]


def test_authorize_unknown_action(client):
    r = client.post(
        "/api/v1/access/leads/authorize/",
        {"user": MANAGER, "action": "archive", "lead": {"id": "l1"}},
        format="json",
    )
    assert r.status_code == 400


def test_capabilities(client):
    r = client.post("/api/v1/access/capabilities/", {"user": {"id": "a1", "role": "admin"}}, format="json")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["role"] == "admin"
    assert data["role_level"] == 3
    assert data["can_delete_lead"] is True
    assert data["routes"]["/settings"] is True


def test_capabilities_null_user(client):
    r = client.post("/api/v1/access/capabilities/", {"user": None}, format="json")
    data = r.json()["data"]
    assert data["role"] is None
    assert not any(data["routes"].values())
    assert data["can_manage_team"] is False


def test_route_check(client):
    agent = {"id": "u2", "role": "agent"}
    r = client.post("/api/v1/access/routes/check/", {"user": agent, "route": "/settings"}, format="json")
    assert r.json()["data"] == {"route": "/settings", "allowed": False, "registered": True}

    r = client.post("/api/v1/access/routes/check/", {"user": agent, "route": "/nonexistent-route"}, format="json")
    assert r.json()["data"] == {"route": "/nonexistent-route", "allowed": True, "registered": False}


def test_route_check_default_deny(client, settings):
    settings.ACCESS_CONTROL = {"UNKNOWN_ROUTES_ALLOWED": False}
    r = client.post(
        "/api/v1/access/routes/check/",
        {"user": {"id": "c", "role": "ceo"}, "route": "/nonexistent-route"},
        format="json",
    )
    assert r.json()["data"]["allowed"] is False


def test_request_id_is_echoed(client):
    r = client.post(
        "/api/v1/access/capabilities/",
        {"user": None},
        format="json",
        HTTP_X_REQUEST_ID="abc123",
    )
    assert r["X-Request-Id"] == "abc123"


def test_request_id_is_generated(client):
    r = client.post("/api/v1/access/capabilities/", {"user": None}, format="json")
    assert len(r["X-Request-Id"]) == 32


def test_route_check_uses_path_as_given(client):
    agent = {"id": "u2", "role": "agent"}
    r = client.post("/api/v1/access/routes/check/", {"user": agent, "route": "/settings/"}, format="json")
    assert r.json()["data"] == {"route": "/settings/", "allowed": True, "registered": False}

    r = client.post("/api/v1/access/routes/check/", {"user": agent, "route": " /settings"}, format="json")
    assert r.json()["data"] == {"route": " /settings", "allowed": True, "registered": False}


def test_route_check_default_deny_covers_trailing_slash(client, settings):
    settings.ACCESS_CONTROL = {"UNKNOWN_ROUTES_ALLOWED": False}
    r = client.post(
        "/api/v1/access/routes/check/",
        {"user": {"id": "u2", "role": "agent"}, "route": "/settings/"},
        format="json",
    )
    assert r.json()["data"]["allowed"] is False
