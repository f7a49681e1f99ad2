"""Normalizer GitHub: projeção dos payloads do upstream nas views de domínio."""

from .extractor import (
    build_profile_overview,
    extract_issue_result,
    extract_owner_login,
    extract_profile_view,
    extract_repository_views,
)

__all__ = [
    "build_profile_overview",
    "extract_issue_result",
    "extract_owner_login",
    "extract_profile_view",
    "extract_repository_views",
]
