# cadastro/application/dtos/validacao_dto.py
from enum import StrEnum

from pydantic import BaseModel, Field


class Campo(StrEnum):
    CPF = "cpf"
    EMAIL = "email"
    NOME = "nome"


class ValorBrutoDTO(BaseModel):
    valor: str = Field(..., max_length=500)


class CpfDTO(BaseModel):
    raw: str
    formatted: str


class EmailDTO(BaseModel):
    raw: str
    formatted: str
    dominio: str
    usuario: str


class NomeDTO(BaseModel):
    raw: str
    formatted: str
    primeiro_nome: str
    ultimo_nome: str


class VerificacaoDTO(BaseModel):
    campo: Campo
    valido: bool
