"""Unit tests for the exception hierarchy."""

from simplenotes.core.exceptions import (
    MalformedIdentifierError,
    NotFoundError,
    SimpleNotesError,
    ValidationError,
)


def test_all_errors_share_the_base_class():
    for exc in (ValidationError(), MalformedIdentifierError("x"), NotFoundError()):
        assert isinstance(exc, SimpleNotesError)


def test_status_codes():
    assert SimpleNotesError.status_code == 500
    assert ValidationError.status_code == 400
    assert MalformedIdentifierError.status_code == 400
    assert NotFoundError.status_code == 404


def test_validation_error_records_field():
    exc = ValidationError("content is required", field="content")

    assert exc.message == "content is required"
    assert exc.field == "content"
    assert exc.context == {"field": "content"}


def test_not_found_message_names_resource():
    exc = NotFoundError("note", "5a3d5da59070081a82a3445b")

    assert exc.message == "note with ID '5a3d5da59070081a82a3445b' was not found"
    assert exc.context == {"resource": "note", "resource_id": "5a3d5da59070081a82a3445b"}


def test_not_found_default_message():
    assert NotFoundError().message == "The requested resource was not found"
