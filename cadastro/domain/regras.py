# cadastro/domain/regras.py
#
# Ordered validation rules shared by the value objects.
#
# Design decisions:
#   - Each rule is an independent predicate paired with its own message.
#     Rules run in declaration order and stop at the first failure, so the
#     structural checks (length, digit count) must come before the semantic ones.
#   - primeira_falha returns the message instead of raising so that is_valid
#     predicates can probe without exceptions as control flow.
#
# Invariants:
#   - Predicates are pure and never mutate their input.
#   - aplicar returns the value unchanged when every rule passes.
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import ValidationError


@dataclass(frozen=True)
class Regra:
    predicado: Callable[[str], bool]
    mensagem: str


def primeira_falha(valor: str, regras: Sequence[Regra]) -> str | None:
    """Mensagem da primeira regra violada, ou None se todas passam."""
    for regra in regras:
        if not regra.predicado(valor):
            return regra.mensagem
    return None


def aplicar(valor: str, regras: Sequence[Regra]) -> str:
    mensagem = primeira_falha(valor, regras)
    if mensagem is not None:
        raise ValidationError(mensagem)
    return valor
