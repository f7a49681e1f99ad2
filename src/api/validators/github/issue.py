"""Validação do body de criação de issue."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from utils.errors import ValidationError

MISSING_FIELDS_MESSAGE = "Both title and body are required"


@dataclass(frozen=True, slots=True)
class IssueRequest:
    """Campos aceitos para criar uma issue."""

    title: str
    body: str


def parse_issue_body(raw_body: bytes) -> dict[str, Any] | None:
    """Decodifica o body JSON; None se vazio, malformado ou não-objeto."""
    if not raw_body:
        return None
    try:
        payload = json.loads(raw_body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def validate_issue_request(payload: dict[str, Any] | None) -> IssueRequest:
    """Valida title e body da issue.

    Args:
        payload: Body já decodificado (None = ausente/malformado)

    Returns:
        IssueRequest com os dois campos.

    Raises:
        ValidationError: Se title ou body estão ausentes, vazios ou não são texto.
    """
    payload = payload or {}
    title = payload.get("title")
    body = payload.get("body")
    if not _is_non_empty_text(title) or not _is_non_empty_text(body):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    return IssueRequest(title=title, body=body)


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)
