"""Tests for decoding service account credentials."""

from __future__ import annotations

import json

import pytest
from distribute_common.credentials import parse_service_account
from distribute_common.errors import CredentialParseError
from distribute_test_helpers import SERVICE_ACCOUNT, service_account_json


def test_parse_exposes_project_id_unchanged() -> None:
    """A valid document parses and keeps ``project_id`` verbatim."""

    key = parse_service_account(service_account_json(project_id="My-Project-42"))

    assert key.project_id == "My-Project-42"
    assert key.client_email == SERVICE_ACCOUNT["client_email"]
    assert key.token_uri == SERVICE_ACCOUNT["token_uri"]
    assert key.info["client_id"] == SERVICE_ACCOUNT["client_id"]


def test_repr_hides_private_key() -> None:
    """The private key never appears in the dataclass representation."""

    key = parse_service_account(service_account_json())

    assert "fake-key" not in repr(key)
    assert "test-project" in repr(key)


@pytest.mark.parametrize(
    "text",
    ["", "{not json", '{"project_id": "p",}', "service_account"],
)
def test_malformed_json_fails_loudly(text: str) -> None:
    """Malformed JSON surfaces a credential error."""

    with pytest.raises(CredentialParseError, match="not valid JSON"):
        parse_service_account(text)


def test_decode_error_does_not_leak_content() -> None:
    """The error neither quotes nor chains the credential text."""

    secret = '{"private_key": "super-secret-material" oops}'
    with pytest.raises(CredentialParseError) as exc:
        parse_service_account(secret)

    assert "super-secret-material" not in str(exc.value)
    assert exc.value.__cause__ is None
    assert exc.value.__suppress_context__ is True


@pytest.mark.parametrize("document", ["[]", '"text"', "42", "null"])
def test_non_object_documents_are_rejected(document: str) -> None:
    """Only JSON objects are accepted as credentials."""

    with pytest.raises(CredentialParseError, match="must be a JSON object"):
        parse_service_account(document)


def test_minimal_document_with_project_id_parses() -> None:
    """Only ``project_id`` is needed to parse; key material is checked later."""

    key = parse_service_account(json.dumps({"project_id": "p"}))

    assert key.project_id == "p"
    assert key.client_email == ""
    assert key.private_key == ""
    assert key.token_uri == ""
    assert dict(key.info) == {"project_id": "p"}


def test_non_string_optional_fields_are_treated_as_absent() -> None:
    """Odd types in the signing fields do not stop parsing."""

    key = parse_service_account(
        json.dumps({"project_id": "p", "client_email": 7, "private_key": None})
    )

    assert key.client_email == ""
    assert key.private_key == ""


@pytest.mark.parametrize(
    "document",
    [
        {key: value for key, value in SERVICE_ACCOUNT.items() if key != "project_id"},
        {**SERVICE_ACCOUNT, "project_id": ""},
        {**SERVICE_ACCOUNT, "project_id": 42},
    ],
    ids=["missing", "empty", "not-a-string"],
)
def test_project_id_is_required(document: dict[str, object]) -> None:
    """A document without a usable ``project_id`` is rejected by name."""

    with pytest.raises(CredentialParseError, match="project_id"):
        parse_service_account(json.dumps(document))
