"""Router principal do GitHub: agrega todos os endpoints do relay."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.github.issues import router as issues_router
from api.routes.github.profile import router as profile_router

GITHUB_PREFIX = "/github"

router = APIRouter()

# Prefixo aplicado aqui: profile registra GET "" (GET /github sem barra)
router.include_router(issues_router, prefix=GITHUB_PREFIX)
router.include_router(profile_router, prefix=GITHUB_PREFIX)
