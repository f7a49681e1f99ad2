"""Validadores de input das rotas GitHub.

Uso:
    from api.validators.github import parse_issue_body, validate_issue_request

    issue = validate_issue_request(parse_issue_body(raw_body))
"""

from api.validators.github.issue import (
    MISSING_FIELDS_MESSAGE,
    IssueRequest,
    parse_issue_body,
    validate_issue_request,
)

__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "IssueRequest",
    "parse_issue_body",
    "validate_issue_request",
]
