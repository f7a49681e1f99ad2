"""Use cases das rotas GitHub."""

from .create_issue import CreateIssueUseCase
from .get_profile_overview import GetProfileOverviewUseCase
from .get_repository import GetRepositoryUseCase

__all__ = [
    "CreateIssueUseCase",
    "GetProfileOverviewUseCase",
    "GetRepositoryUseCase",
]
