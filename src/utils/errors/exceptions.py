"""Exceções do relay GitHub.

Toda falha conhecida herda de RelayError e carrega o status HTTP
que a borda deve devolver. A mensagem pública nunca inclui detalhes
do upstream (status, body) nem o token.
"""

from __future__ import annotations

UPSTREAM_FAILURE_MESSAGE = "GitHub API request failed"


class RelayError(Exception):
    """Base para falhas tratadas na borda HTTP."""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, str]:
        """Corpo plano `{error: str}` devolvido ao chamador."""
        return {"error": self.message}


class ConfigurationError(RelayError):
    """Credencial ausente ou configuração inválida (sempre 500)."""


class ValidationError(RelayError):
    """Input do cliente malformado (sempre 400, sem chamada de rede)."""

    http_status = 400


class UpstreamError(RelayError):
    """Falha na API GitHub: transporte, status não-2xx ou body inválido.

    Args:
        message: Descrição curta para logs.
        status_code: Status HTTP do upstream, quando houve resposta.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def to_response(self) -> dict[str, str]:
        # Mensagem interna fica só nos logs
        return {"error": UPSTREAM_FAILURE_MESSAGE}


class UpstreamNotFoundError(UpstreamError):
    """Upstream respondeu 404 para o recurso pedido."""
