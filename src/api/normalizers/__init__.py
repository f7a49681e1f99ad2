"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- github/: conta, repositórios e issues da REST API do GitHub
"""

from .github import build_profile_overview, extract_issue_result, extract_owner_login

__all__ = [
    "build_profile_overview",
    "extract_issue_result",
    "extract_owner_login",
]
