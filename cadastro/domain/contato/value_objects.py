# cadastro/domain/contato/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

from ..regras import Regra, aplicar, primeira_falha

# Parte local sem ponto inicial nem ".." ; dominio com pelo menos um ponto e TLD >= 2 letras
_EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)[a-z0-9_'+\-.]*[a-z0-9_+-]@([a-z0-9][a-z0-9\-]*\.)+[a-z]{2,}"
)
_TAMANHO_MAXIMO = 255

_REGRAS_EMAIL = (
    Regra(lambda e: _EMAIL_PATTERN.fullmatch(e) is not None, "Email inválido"),
    Regra(lambda e: len(e) <= _TAMANHO_MAXIMO, "Email não pode exceder 255 caracteres"),
)


def _normalizar_email(email: str) -> str:
    return email.strip().lower()


@dataclass(frozen=True)
class Email:
    """Endereco de email trimado e em minusculas."""

    _valor: str

    def __init__(self, raw: str) -> None:
        email = aplicar(_normalizar_email(raw), _REGRAS_EMAIL)
        object.__setattr__(self, "_valor", email)

    @property
    def raw(self) -> str:
        return self._valor

    @property
    def formatted(self) -> str:
        return self._valor

    def get_domain(self) -> str:
        """Parte apos o @."""
        return self._valor.partition("@")[2]

    def get_username(self) -> str:
        """Parte antes do @."""
        return self._valor.partition("@")[0]

    def has_domain(self, domain: str) -> bool:
        return self.get_domain().lower() == domain.lower()

    @staticmethod
    def is_valid(raw: str) -> bool:
        try:
            return primeira_falha(_normalizar_email(raw), _REGRAS_EMAIL) is None
        except (AttributeError, TypeError):
            return False

    def __repr__(self) -> str:
        return f"Email({self._valor!r})"

    def __str__(self) -> str:
        return self._valor
