# tests/domain/test_cpf_vo.py
import dataclasses

import pytest

from cadastro.domain.errors import ValidationError
from cadastro.domain.pessoa.value_objects import CPF

CPFS_VALIDOS = [
    "529.982.247-25",
    "111.444.777-35",
    "448.748.803-63",
    "053.125.853-00",
    "762.543.213-00",
]


def test_cpf_valido_formatado():
    cpf = CPF("529.982.247-25")
    assert cpf.raw == "52998224725"


def test_cpf_valido_sem_formatacao():
    cpf = CPF("52998224725")
    assert cpf.formatted == "529.982.247-25"


def test_cpf_ignora_espacos_e_letras():
    assert CPF("529 982 247 25").raw == "52998224725"
    assert CPF("529a982b247c25").raw == "52998224725"


@pytest.mark.parametrize("raw", CPFS_VALIDOS)
def test_cpfs_validos_conhecidos(raw: str) -> None:
    cpf = CPF(raw)
    assert cpf.formatted == raw
    assert CPF.is_valid(raw)
    assert CPF.is_valid(cpf.raw)


def test_cpf_comprimento_errado():
    with pytest.raises(ValidationError, match="CPF deve conter exatamente 11 dígitos numéricos"):
        CPF("1234567890")
    with pytest.raises(ValidationError, match="CPF deve conter exatamente 11 dígitos numéricos"):
        CPF("123456789012")


def test_cpf_digito_verificador_invalido():
    with pytest.raises(ValidationError, match="CPF inválido"):
        CPF("123.456.789-01")


@pytest.mark.parametrize("digito", "0123456789")
def test_cpf_todos_iguais_invalido(digito: str) -> None:
    with pytest.raises(ValidationError, match="CPF inválido"):
        CPF(digito * 11)
    assert not CPF.is_valid(digito * 11)


@pytest.mark.parametrize("raw", ["529.982.247-26", "529.982.247-15", "111.444.777-00"])
def test_cpf_com_digito_verificador_trocado(raw: str) -> None:
    """Trocar qualquer um dos dois digitos verificadores invalida o CPF."""
    with pytest.raises(ValidationError):
        CPF(raw)
    assert not CPF.is_valid(raw)


def test_validation_error_e_value_error():
    with pytest.raises(ValueError):
        CPF("12345")


@pytest.mark.parametrize("raw", ["", "12345", "123456789012345", None, 52998224725])
def test_is_valid_nunca_lanca(raw: object) -> None:
    assert CPF.is_valid(raw) is False  # type: ignore[arg-type]


def test_cpf_repr_nunca_mostra_completo():
    """CPF nunca aparece completo em logs/repr (LGPD)."""
    cpf = CPF("52998224725")
    assert "52998224725" not in repr(cpf)
    assert "52998224725" not in str(cpf)
    assert repr(cpf) == "CPF('***.982.247-**')"


def test_cpf_igualdade_por_valor():
    a = CPF("52998224725")
    b = CPF("529.982.247-25")
    assert a == b
    assert hash(a) == hash(b)
    assert a != CPF("11144477735")


def test_cpf_imutavel():
    cpf = CPF("52998224725")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cpf._valor = "11144477735"  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw",
    CPFS_VALIDOS + [
        "1234567890",       # 10 digitos
        "123456789012",     # 12 digitos
        "123.456.789-01",   # checksum
        "529.982.247-26",   # segundo digito
        "529.982.247-15",   # primeiro digito
        "000.000.000-00",
        "cpf: 529.982.247-25",
        "",
    ],
)
def test_is_valid_concorda_com_construtor(raw: str) -> None:
    try:
        CPF(raw)
        construiu = True
    except ValidationError:
        construiu = False
    assert CPF.is_valid(raw) is construiu
