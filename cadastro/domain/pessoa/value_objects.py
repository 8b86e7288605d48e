# cadastro/domain/pessoa/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass

from ..regras import Regra, aplicar, primeira_falha

_NAO_DIGITO = re.compile(r"\D", re.ASCII)
_ONZE_DIGITOS = re.compile(r"\d{11}", re.ASCII)


def _digito_verificador(digitos: str, quantidade: int) -> int:
    """Soma ponderada dos primeiros `quantidade` digitos, pesos decrescentes ate 2."""
    peso_inicial = quantidade + 1
    soma = sum(int(digitos[i]) * (peso_inicial - i) for i in range(quantidade))
    resto = (soma * 10) % 11
    return 0 if resto == 10 else resto


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    if len(set(digitos)) == 1:
        return False
    if _digito_verificador(digitos, 9) != int(digitos[9]):
        return False
    return _digito_verificador(digitos, 10) == int(digitos[10])


_REGRAS_CPF = (
    Regra(lambda d: _ONZE_DIGITOS.fullmatch(d) is not None,
          "CPF deve conter exatamente 11 dígitos numéricos"),
    Regra(_verificar_cpf, "CPF inválido"),
)


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""
    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        digitos = aplicar(_NAO_DIGITO.sub("", raw), _REGRAS_CPF)
        object.__setattr__(self, "_valor", digitos)

    @property
    def raw(self) -> str:
        """11 digitos sem formatacao. Usar com cuidado: nunca logar."""
        return self._valor

    @property
    def formatted(self) -> str:
        """XXX.XXX.XXX-XX"""
        d = self._valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** , formato seguro para logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    @staticmethod
    def is_valid(raw: str) -> bool:
        try:
            return primeira_falha(_NAO_DIGITO.sub("", raw), _REGRAS_CPF) is None
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


# Preposicoes, artigos e conectivos mantidos em minusculo (exceto na primeira palavra)
_PALAVRAS_MINUSCULAS = frozenset(
    {"de", "da", "do", "das", "dos", "e", "o", "a", "os", "as", "em", "com"}
)
# Unicas palavras de 1 caractere aceitas
_CONECTIVOS_CURTOS = frozenset({"e", "o", "a", "à", "é"})
_COMPONENTE = re.compile(r"[a-zA-ZÀ-ÖØ-öø-ÿ][a-zA-ZÀ-ÖØ-öø-ÿ'-]*")


def _capitalizar(palavra: str) -> str:
    """Capitaliza respeitando hifens (por segmento) e apostrofos (prefixo preservado)."""
    if "-" in palavra:
        return "-".join(_capitalizar(parte) for parte in palavra.split("-"))

    if "'" in palavra:
        prefixo, _, resto = palavra.partition("'")
        return f"{prefixo}'{_capitalizar(resto)}" if resto else f"{prefixo}'"

    return palavra[:1].upper() + palavra[1:].lower()


def _normalizar_nome(nome: str) -> str:
    palavras = " ".join(nome.split()).split(" ")
    normalizadas = [_capitalizar(palavras[0])]
    for palavra in palavras[1:]:
        if palavra.lower() in _PALAVRAS_MINUSCULAS:
            normalizadas.append(palavra.lower())
        else:
            normalizadas.append(_capitalizar(palavra))
    return " ".join(normalizadas)


def _componente_valido(componente: str) -> bool:
    if len(componente) == 1 and componente.lower() not in _CONECTIVOS_CURTOS:
        return False
    return _COMPONENTE.fullmatch(componente) is not None


def _formato_nome_valido(nome: str) -> bool:
    componentes = nome.split()
    if len(componentes) < 2:
        return False
    return all(_componente_valido(c) for c in componentes)


def _tamanho(nome: str) -> int:
    """Tamanho em unidades UTF-16, a mesma contagem dos cadastros legados."""
    return len(nome.encode("utf-16-le", "surrogatepass")) // 2


_REGRAS_NOME = (
    Regra(lambda n: _tamanho(n) >= 3, "Nome completo deve ter pelo menos 3 caracteres"),
    Regra(lambda n: _tamanho(n) <= 100, "Nome completo não pode exceder 100 caracteres"),
    Regra(_formato_nome_valido, "Nome completo inválido"),
)


@dataclass(frozen=True)
class FullName:
    """Nome completo normalizado: espacos colapsados, capitalizacao brasileira.

    Invariantes (sobre o valor normalizado):
      - 3 a 100 caracteres, pelo menos nome e sobrenome.
      - cada componente comeca com letra (ASCII ou Latin-1) e so contem letras,
        hifens e apostrofos; componentes de 1 letra so se forem conectivos.
    """

    _valor: str

    def __init__(self, raw: str) -> None:
        nome = aplicar(_normalizar_nome(raw), _REGRAS_NOME)
        object.__setattr__(self, "_valor", nome)

    @property
    def raw(self) -> str:
        return self._valor

    @property
    def formatted(self) -> str:
        """Igual a raw: o valor ja e armazenado normalizado."""
        return self._valor

    def get_first_name(self) -> str:
        return self._valor.split(" ")[0]

    def get_last_name(self) -> str:
        return self._valor.split(" ")[-1]

    @staticmethod
    def is_valid(raw: str) -> bool:
        try:
            return primeira_falha(_normalizar_nome(raw), _REGRAS_NOME) is None
        except (AttributeError, TypeError):
            return False

    def __repr__(self) -> str:
        return f"FullName({self._valor!r})"

    def __str__(self) -> str:
        return self._valor
