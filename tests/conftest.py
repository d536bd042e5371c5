# tests/conftest.py

"""
Shared snapshots for access-control tests.

Org chart:
    ceo-1 (ceo), admin-1 (admin)
    mgr-1 (manager)  <- agent-1, agent-2
    mgr-2 (manager)  <- agent-3
    agent-4 reports to a manager that does not exist
"""

import pytest
from rest_framework.test import APIClient

from core.entities import Lead, User
from core.utils.context import RequestContext


@pytest.fixture
def ceo():
    return User(id="ceo-1", role="ceo")


@pytest.fixture
def admin():
    return User(id="admin-1", role="admin")


@pytest.fixture
def manager():
    return User(id="mgr-1", role="manager")


@pytest.fixture
def other_manager():
    return User(id="mgr-2", role="manager")


@pytest.fixture
def agent():
    return User(id="agent-1", role="agent", manager_id="mgr-1")


@pytest.fixture
def team(ceo, admin, manager, other_manager, agent):
    return [
        ceo,
        admin,
        manager,
        other_manager,
        agent,
        User(id="agent-2", role="agent", manager_id="mgr-1"),
        User(id="agent-3", role="agent", manager_id="mgr-2"),
        User(id="agent-4", role="agent", manager_id="ghost"),
    ]


@pytest.fixture
def leads():
    return [
        Lead(id="l-agent-1", assigned_to="agent-1", payload={"name": "Sara", "budget": 2500000}),
        Lead(id="l-agent-2", assigned_to="agent-2"),
        Lead(id="l-agent-3", assigned_to="agent-3"),
        Lead(id="l-agent-4", assigned_to="agent-4"),
        Lead(id="l-mgr-1", assigned_to="mgr-1"),
        Lead(id="l-ghost", assigned_to="nobody"),
        Lead(id="l-unassigned", assigned_to=None),
        Lead(id="l-blank", assigned_to=""),
    ]


@pytest.fixture
def make_ctx():
    def _make(actor):
        return RequestContext(actor=actor, request_id="test-request")
    return _make


@pytest.fixture
def client():
    """DRF test client; no authentication is configured for the access API."""
    return APIClient()
