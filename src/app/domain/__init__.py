"""Modelos de domínio compartilhados entre use cases e rotas."""

from app.domain.github import (
    PROFILE_FIELDS,
    REPOSITORY_FIELDS,
    IssueCreationResult,
    ProfileOverview,
    ProfileView,
    RepositoryView,
)

__all__ = [
    "PROFILE_FIELDS",
    "REPOSITORY_FIELDS",
    "IssueCreationResult",
    "ProfileOverview",
    "ProfileView",
    "RepositoryView",
]
