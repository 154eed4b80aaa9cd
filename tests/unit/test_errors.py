"""
Unit tests for validation error collection in user_directory.api.errors
"""
from user_directory.api.errors import collect_field_errors


def test_one_message_per_field():
    errors = collect_field_errors([
        {"loc": ("body", "password"), "msg": "Password must be at least 8 characters", "type": "password_too_short"},
        {"loc": ("body", "password"), "msg": "second", "type": "other"},
        {"loc": ("body", "fullName"), "msg": "Full name is required", "type": "required"},
    ])
    assert [(e.field, e.message) for e in errors] == [
        ("password", "Password must be at least 8 characters"),
        ("fullName", "Full name is required"),
    ]


def test_missing_field_message():
    errors = collect_field_errors([{"loc": ("body", "dob"), "msg": "Field required", "type": "missing"}])
    assert errors[0].message == "dob is required"


def test_body_level_error_falls_back_to_body():
    errors = collect_field_errors([{"loc": ("body", 12), "msg": "JSON decode error", "type": "json_invalid"}])
    assert errors[0].field == "body"
