"""Erros e helpers de parsing para respostas de erro da API GitHub."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GitHubApiError:
    """Erro retornado pela API GitHub (body `{message, documentation_url}`)."""

    status_code: int
    message: str
    documentation_url: str | None = None

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


def parse_github_error(status_code: int, response_data: Any) -> GitHubApiError:
    """Extrai informações de erro de um response não-2xx.

    Body ausente ou fora do formato esperado não impede a classificação;
    só o status é obrigatório.

    Args:
        status_code: Status HTTP do response
        response_data: Body já decodificado (ou None)

    Returns:
        GitHubApiError com mensagem do upstream, quando houver.
    """
    message = "Erro desconhecido"
    documentation_url = None
    if isinstance(response_data, dict):
        raw_message = response_data.get("message")
        if isinstance(raw_message, str) and raw_message:
            message = raw_message
        raw_doc = response_data.get("documentation_url")
        if isinstance(raw_doc, str):
            documentation_url = raw_doc

    return GitHubApiError(
        status_code=status_code,
        message=message,
        documentation_url=documentation_url,
    )
