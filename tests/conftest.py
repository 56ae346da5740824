"""Shared fixtures: users per role, authenticated API clients and a client-side transport."""

import pytest
from rest_framework.test import APIClient

from taskflow_client.transport import ApiResponse, Transport
from taskflow_user.models import Profile, Role, User


def make_user(email, role, name=None, avatar_url=None):
    user = User.objects.create_user(
        email=email, password="secret-pass-123", name=name or email.split("@")[0].title(), role=role
    )
    if avatar_url:
        Profile.objects.create(user=user, avatar_url=avatar_url)
    return user


@pytest.fixture
def admin(db):
    return make_user("admin@example.com", Role.ADMINISTRATOR, name="Ada Admin")


@pytest.fixture
def manager(db):
    return make_user("pm@example.com", Role.PROJECT_MANAGER, name="Pat Manager", avatar_url="https://img/pat.png")


@pytest.fixture
def colaborator(db):
    return make_user("colab@example.com", Role.COLABORATOR, name="Cole Laborator")


@pytest.fixture
def other_colaborator(db):
    return make_user("other@example.com", Role.COLABORATOR, name="Otto Other")


@pytest.fixture
def api():
    """Return a factory for API clients authenticated as the given user."""
    def _client(user=None):
        client = APIClient()
        if user is not None:
            client.force_authenticate(user=user)
        return client
    return _client


class APIClientTransport(Transport):
    """Transport that drives the view-model against the in-process API."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, path, payload=None):
        self.calls.append((method, path, payload))
        handler = getattr(self.client, method.lower())
        if method == "GET":
            response = handler(path)
        else:
            response = handler(path, payload, format="json")
        body = response.json() if response.content else None
        return ApiResponse(status=response.status_code, body=body)


class StubTransport(Transport):
    """Transport returning queued responses, for failure paths."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, path, payload=None):
        self.calls.append((method, path, payload))
        return self.responses.pop(0)


@pytest.fixture
def transport_for(api):
    def _transport(user):
        return APIClientTransport(api(user))
    return _transport
