# cadastro/domain/errors.py
from __future__ import annotations


class ValidationError(ValueError):
    """Valor bruto rejeitado por um value object. A mensagem e exibivel ao usuario."""

    def __init__(self, mensagem: str) -> None:
        super().__init__(mensagem)
        self.mensagem = mensagem
