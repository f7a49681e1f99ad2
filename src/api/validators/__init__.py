"""Validators: validação de input recebido pelas rotas.

Estrutura:
- github/: body de criação de issue
"""

__all__: list[str] = []
