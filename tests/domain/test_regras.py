# tests/domain/test_regras.py
import pytest

from cadastro.domain.errors import ValidationError
from cadastro.domain.regras import Regra, aplicar, primeira_falha

REGRAS = (
    Regra(lambda v: len(v) >= 2, "curto"),
    Regra(lambda v: v.isalpha(), "nao alfabetico"),
)


def test_primeira_falha_none_quando_tudo_passa():
    assert primeira_falha("abc", REGRAS) is None


def test_primeira_falha_respeita_ordem():
    """'1' viola as duas regras; so a primeira e reportada."""
    assert primeira_falha("1", REGRAS) == "curto"
    assert primeira_falha("12", REGRAS) == "nao alfabetico"


def test_para_na_primeira_falha():
    chamadas: list[str] = []

    def registra(v: str) -> bool:
        chamadas.append(v)
        return True

    primeira_falha("x", (Regra(lambda v: False, "falha"), Regra(registra, "nunca")))
    assert chamadas == []


def test_aplicar_retorna_valor():
    assert aplicar("abc", REGRAS) == "abc"


def test_aplicar_lanca_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        aplicar("1", REGRAS)
    assert exc_info.value.mensagem == "curto"
    assert str(exc_info.value) == "curto"
    assert isinstance(exc_info.value, ValueError)
