"""API: camada de borda.

Responsabilidades:
- Receber requests HTTP e validar input
- Falar com a REST API do GitHub (único ponto de IO externo)
- Projetar payloads externos nas views internas
- Converter erros em respostas `{error}`

Subpastas:
- connectors/: cliente HTTP e headers autenticados do GitHub
- normalizers/: payloads do upstream → views de domínio
- validators/: validação de input das rotas
- routes/: endpoints HTTP (github, health)

NÃO PODE conter: orquestração de use cases.
"""
