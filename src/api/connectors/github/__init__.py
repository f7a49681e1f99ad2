"""Conector GitHub - adapter de borda para a REST API.

Este módulo é o único ponto de IO com o upstream.
Responsabilidades:
- Headers autenticados (Accept, versão da API, Bearer)
- HTTP client para conta, repositórios e issues
- Parsing e logging de erros do upstream
"""

from .auth import MISSING_TOKEN_MESSAGE, build_auth_headers
from .github_errors import GitHubApiError, parse_github_error
from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import GitHubHttpClient, create_github_http_client

__all__ = [
    "MISSING_TOKEN_MESSAGE",
    "GitHubApiError",
    "GitHubHttpClient",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "build_auth_headers",
    "create_github_http_client",
    "parse_github_error",
]
