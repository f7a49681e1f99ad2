"""Protocolos e contratos do core da aplicação."""

from .http_client import AuthHeadersProviderProtocol, GitHubClientProtocol
from .normalizer import GitHubResponseShaperProtocol

__all__ = [
    "AuthHeadersProviderProtocol",
    "GitHubClientProtocol",
    "GitHubResponseShaperProtocol",
]
