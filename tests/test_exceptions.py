"""
Tests for the shared error body and the internal-error path.
"""
import logging

import pytest
from rest_framework import status
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from taskflow.exceptions import INTERNAL_ERROR_MESSAGE, Conflict, api_exception_handler
from taskflow_app.services import ProjectService


def test_validation_error_names_fields():
    response = api_exception_handler(ValidationError({"name": ["This field is required."]}), {})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["error"] == "Invalid input: name"
    assert response.data["fields"] == {"name": ["This field is required."]}


def test_non_field_validation_error_uses_message():
    response = api_exception_handler(ValidationError("Nope"), {})
    assert response.data["error"] == "Nope"


@pytest.mark.parametrize("exc,code", [
    (PermissionDenied("Forbidden here"), 403),
    (NotFound("Gone"), 404),
    (Conflict("Taken"), 409),
])
def test_recoverable_errors_are_reported_verbatim(exc, code):
    response = api_exception_handler(exc, {})
    assert response.status_code == code
    assert response.data == {"error": str(exc.detail)}


def test_unexpected_error_is_logged_and_hidden(caplog):
    logger = logging.getLogger("taskflow.exceptions")
    logger.addHandler(caplog.handler)
    try:
        response = api_exception_handler(RuntimeError("db password is hunter2"), {"view": None})
    finally:
        logger.removeHandler(caplog.handler)
    assert response.status_code == 500
    assert response.data == {"error": INTERNAL_ERROR_MESSAGE}
    assert "hunter2" in caplog.text


@pytest.mark.django_db
def test_internal_failure_through_the_api(api, admin, monkeypatch):
    def explode(self, serializer):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(ProjectService, "perform_create", explode)
    response = api(admin).post("/api/projects/", {"name": "x"}, format="json")
    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}
