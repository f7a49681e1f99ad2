"""Testes da validação do body de criação de issue."""

from __future__ import annotations

import pytest

from api.validators.github import (
    MISSING_FIELDS_MESSAGE,
    IssueRequest,
    parse_issue_body,
    validate_issue_request,
)
from utils.errors import ValidationError


class TestParseIssueBody:
    """Testes para parse_issue_body."""

    def test_decodes_json_object(self) -> None:
        assert parse_issue_body(b'{"title": "t", "body": "b"}') == {"title": "t", "body": "b"}

    @pytest.mark.parametrize("raw", [b"", b"{", b"null", b"[]", b'"texto"', b"\xff\xfe"])
    def test_returns_none_for_absent_or_malformed(self, raw: bytes) -> None:
        assert parse_issue_body(raw) is None


class TestValidateIssueRequest:
    """Testes para validate_issue_request."""

    def test_accepts_title_and_body(self) -> None:
        issue = validate_issue_request({"title": "Bug", "body": "Descrição", "labels": ["x"]})

        assert issue == IssueRequest(title="Bug", body="Descrição")

    def test_accepts_whitespace_strings(self) -> None:
        issue = validate_issue_request({"title": " ", "body": " "})

        assert issue.title == " "

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {},
            {"title": "Bug"},
            {"body": "Descrição"},
            {"title": "", "body": "Descrição"},
            {"title": "Bug", "body": ""},
            {"title": None, "body": "Descrição"},
            {"title": 1, "body": "Descrição"},
            {"title": "Bug", "body": ["linha"]},
        ],
    )
    def test_rejects_missing_or_empty_fields(self, payload: dict[str, object] | None) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_issue_request(payload)

        assert exc_info.value.http_status == 400
        assert exc_info.value.to_response() == {"error": MISSING_FIELDS_MESSAGE}
