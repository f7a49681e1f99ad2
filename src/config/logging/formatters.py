"""Formatter JSON dos logs do relay.

Todo registro sai como um objeto JSON por linha com os campos de
REQUIRED_LOG_FIELDS; campos passados via `extra` são anexados.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável dos campos obrigatórios
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.routes.github.profile",
         "message": "github_profile_overview_served", "correlation_id": "abc",
         "service": "github-relay", "repository_count": 12}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
