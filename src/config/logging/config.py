"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="github-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("github_call_ok", extra={"latency_ms": 42})

Nunca logar o token nem headers de autorização.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "github-relay"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no logger raiz.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço gravado em todo registro.
        correlation_id_getter: Função que devolve o correlation_id do
            contexto atual (ex: app.observability.get_correlation_id).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação (reload, testes)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_route_failure(
    logger: logging.Logger,
    route: str,
    exc: Exception,
    status_code: int,
) -> None:
    """Loga falha convertida em resposta genérica na borda.

    Registra o tipo do erro e o status do upstream (quando houver),
    nunca o body do upstream.

    Args:
        logger: Logger do módulo de rota.
        route: Identificador da rota (ex: "github_repository").
        exc: Exceção capturada.
        status_code: Status HTTP devolvido ao chamador.
    """
    extra: dict[str, object] = {
        "route": route,
        "error_type": type(exc).__name__,
        "status_code": status_code,
    }
    upstream_status = getattr(exc, "status_code", None)
    if upstream_status is not None:
        extra["upstream_status"] = upstream_status

    logger.error("%s_failed: %s", route, exc, extra=extra)
