"""Tests for path parameter substitution."""

from src.services.routes import substitute_parameters


def test_substitute_id():
    assert substitute_parameters("/api/users/{id}") == "/api/users/1"


def test_substitute_user_id():
    assert substitute_parameters("/api/users/{userId}/orders") == "/api/users/1/orders"


def test_substitute_uuid():
    assert (
        substitute_parameters("/api/{uuid}/x")
        == "/api/550e8400-e29b-41d4-a716-446655440000/x"
    )


def test_substitute_other_token():
    assert substitute_parameters("/api/{foo}") == "/api/test"


def test_no_placeholders_unchanged():
    assert substitute_parameters("/api/plain") == "/api/plain"


def test_each_placeholder_resolved_independently():
    path = "/api/{orderId}/{id}/{uuid}/{userId}"
    assert (
        substitute_parameters(path)
        == "/api/test/1/550e8400-e29b-41d4-a716-446655440000/1"
    )


def test_full_url_substituted():
    assert substitute_parameters("http://host/b/{id}") == "http://host/b/1"


def test_unbalanced_braces_left_as_is():
    assert substitute_parameters("/api/{id") == "/api/{id"
    assert substitute_parameters("/api/id}") == "/api/id}"


def test_empty_placeholder_left_as_is():
    assert substitute_parameters("/api/{}") == "/api/{}"


def test_placeholder_names_are_case_sensitive():
    assert substitute_parameters("/api/{ID}") == "/api/test"
