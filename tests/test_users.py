"""
Tests for user management, profile cascade and the assignee directory.
"""
import uuid

import pytest

from taskflow_app.models import Project, Tag, Task
from taskflow_user.models import Profile, User

pytestmark = pytest.mark.django_db

USERS = "/api/users/"


def detail(pk):
    return "%s%s/" % (USERS, pk)


def test_only_admin_manages_users(api, manager, colaborator):
    for user in (manager, colaborator):
        client = api(user)
        assert client.get(USERS).status_code == 403
        assert client.post(USERS, {"name": "X", "email": "x@example.com", "password": "long-enough"},
                           format="json").status_code == 403
    assert User.objects.filter(email="x@example.com").count() == 0


def test_create_user_with_profile(api, admin):
    response = api(admin).post(USERS, {
        "name": "Nina New",
        "email": "nina@example.com",
        "password": "long-enough-pw",
        "role": "Project_Manager",
        "profile": {"bio": "Hello", "avatar_url": "https://img/nina.png"},
    }, format="json")

    assert response.status_code == 201
    body = response.json()
    assert "password" not in body
    assert body["role"] == "Project_Manager"
    assert body["profile"] == {"bio": "Hello", "avatar_url": "https://img/nina.png"}
    user = User.objects.get(email="nina@example.com")
    assert user.check_password("long-enough-pw")
    assert user.password != "long-enough-pw"


def test_create_user_defaults_to_colaborator(api, admin):
    body = api(admin).post(USERS, {"name": "Def", "email": "def@example.com", "password": "long-enough"},
                           format="json").json()
    assert body["role"] == "Colaborator"
    assert body["profile"] is None


def test_create_user_requires_password(api, admin):
    response = api(admin).post(USERS, {"name": "NoPw", "email": "nopw@example.com"}, format="json")
    assert response.status_code == 400
    assert "password" in response.json()["fields"]


def test_duplicate_email_is_a_conflict(api, admin, colaborator):
    response = api(admin).post(USERS, {
        "name": "Clone", "email": colaborator.email, "password": "long-enough",
    }, format="json")
    assert response.status_code == 409
    assert "email" in response.json()["error"]
    assert User.objects.filter(email=colaborator.email).count() == 1


def test_update_to_duplicate_email_is_a_conflict(api, admin, colaborator, other_colaborator):
    original = other_colaborator.email
    response = api(admin).patch(detail(other_colaborator.pk), {"email": colaborator.email}, format="json")
    assert response.status_code == 409
    assert "email" in response.json()["error"]
    other_colaborator.refresh_from_db()
    assert other_colaborator.email == original


def test_list_users_never_exposes_passwords(api, admin, colaborator):
    body = api(admin).get(USERS).json()
    assert len(body) == 2
    assert all("password" not in user for user in body)


def test_update_user_partially(api, admin, colaborator):
    response = api(admin).patch(detail(colaborator.pk), {
        "role": "Project_Manager", "profile": {"bio": "Promoted"},
    }, format="json")
    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "Project_Manager"
    assert body["name"] == "Cole Laborator"
    assert body["profile"]["bio"] == "Promoted"


def test_update_user_password(api, admin, colaborator):
    api(admin).patch(detail(colaborator.pk), {"password": "another-secret"}, format="json")
    colaborator.refresh_from_db()
    assert colaborator.check_password("another-secret")


def test_delete_user_cascades_to_profile_only(api, admin, manager, colaborator):
    project = Project.objects.create(name="Assigned", assigned_to=manager)
    task = Task.objects.create(title="Assigned", assigned_to=manager)
    profile_id = manager.profile.pk
    other_profile = Profile.objects.create(user=colaborator, bio="stay")

    response = api(admin).delete(detail(manager.pk))

    assert response.status_code == 204
    assert not User.objects.filter(pk=manager.pk).exists()
    assert not Profile.objects.filter(pk=profile_id).exists()
    assert Profile.objects.filter(pk=other_profile.pk).exists()
    project.refresh_from_db()
    task.refresh_from_db()
    assert project.assigned_to is None
    assert task.assigned_to is None


def test_delete_user_with_labels_is_restricted(api, admin, colaborator):
    Tag.objects.create(name="Mine", owner=colaborator)
    response = api(admin).delete(detail(colaborator.pk))
    assert response.status_code == 409
    assert User.objects.filter(pk=colaborator.pk).exists()
    assert Tag.objects.filter(owner=colaborator).count() == 1


def test_delete_missing_user_is_not_found(api, admin):
    assert api(admin).delete(detail(uuid.uuid4())).status_code == 404


def test_directory_is_available_to_every_role(api, admin, manager, colaborator):
    for user in (admin, manager, colaborator):
        response = api(user).get("/api/users/directory/")
        assert response.status_code == 200
        entries = {entry["name"]: entry for entry in response.json()}
        assert set(entries) == {"Ada Admin", "Pat Manager", "Cole Laborator"}
        assert entries["Pat Manager"]["avatar_url"] == "https://img/pat.png"
        assert set(entries["Ada Admin"]) == {"id", "name", "avatar_url"}


def test_directory_is_read_only(api, admin):
    assert api(admin).post("/api/users/directory/", {}, format="json").status_code in (403, 405)
