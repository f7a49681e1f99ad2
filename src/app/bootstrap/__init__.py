"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: carrega o .env, configura logging, valida settings
e expõe as factories do fluxo GitHub.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from dotenv import find_dotenv, load_dotenv

from app.bootstrap.github_factory import (
    create_issue_use_case,
    create_profile_overview_use_case,
    create_repository_use_case,
    get_auth_headers_provider,
    get_github_client,
    get_response_shaper,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_github_settings

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(env_file: str | None = None) -> None:
    """Carrega o .env e inicializa logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço, antes de qualquer
    getter de settings. Variáveis já definidas no ambiente prevalecem
    sobre o arquivo.

    Args:
        env_file: Caminho do .env; por padrão busca a partir do cwd.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging para testes (DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local; as rotas
    GitHub respondem 500 enquanto ACCESS_TOKEN estiver ausente.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"github: {error}" for error in get_github_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_issue_use_case",
    "create_profile_overview_use_case",
    "create_repository_use_case",
    "get_auth_headers_provider",
    "get_github_client",
    "get_response_shaper",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
