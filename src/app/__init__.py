"""App: orquestração, casos de uso e composition root.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: views imutáveis devolvidas pelas rotas
- use_cases/: casos de uso (sem IO direto, falam com protocolos)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
