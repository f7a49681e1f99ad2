"""Dependências FastAPI compartilhadas pelas rotas GitHub."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.bootstrap.github_factory import get_auth_headers_provider
from app.protocols.http_client import AuthHeadersProviderProtocol


def attach_auth_headers(
    provider: Annotated[AuthHeadersProviderProtocol, Depends(get_auth_headers_provider)],
) -> dict[str, str]:
    """Header set autenticado da requisição.

    Roda antes do corpo de toda rota GitHub. Sem credencial levanta
    ConfigurationError, convertida em 500 pelo handler global, antes de
    qualquer validação de input ou chamada de rede.
    """
    return provider.build_headers()


AuthHeaders = Annotated[dict[str, str], Depends(attach_auth_headers)]
