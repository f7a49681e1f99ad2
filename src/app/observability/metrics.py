"""Métricas via logs estruturados.

Cada métrica é um registro de log com nome fixo (`metric_*`) que pode
ser agregado depois pelo backend de logs.
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    *,
    status_code: int | None = None,
    success: bool = True,
) -> None:
    """Registra latência de uma chamada.

    Args:
        component: Componente (ex: "github_client")
        operation: Operação (ex: "fetch_profile")
        latency_ms: Latência em milissegundos
        status_code: Status HTTP do upstream, se houve resposta
        success: False quando a chamada terminou em erro
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "status_code": status_code,
            "success": success,
            "correlation_id": get_correlation_id(),
        },
    )
