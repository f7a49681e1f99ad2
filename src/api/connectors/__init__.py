"""Connectors: adapters de borda para APIs externas.

Estrutura:
- github/: REST API do GitHub (conta, repositórios, issues)
"""

__all__: list[str] = []
