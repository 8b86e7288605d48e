# cadastro/interfaces/api/routes/validacao_routes.py

from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException

from cadastro.application.dtos.validacao_dto import (
    Campo,
    CpfDTO,
    EmailDTO,
    NomeDTO,
    ValorBrutoDTO,
    VerificacaoDTO,
)
from cadastro.application.services.validacao_service import ValidacaoService
from cadastro.domain.errors import ValidationError
from cadastro.infrastructure.config import get_settings
from cadastro.infrastructure.log import log
from cadastro.interfaces.api.dependencies import get_validacao_service

router = APIRouter()

T = TypeVar("T")


def _validar(campo: Campo, converter: Callable[[str], T], raw: str) -> T:
    try:
        return converter(raw)
    except ValidationError as err:
        # Nunca logar o valor bruto (pode ser CPF)
        if get_settings().log_rejeicoes:
            log(f"Rejeitado {campo}: {err.mensagem}")
        raise HTTPException(status_code=422, detail=err.mensagem) from err


@router.post("/validacao/cpf", response_model=CpfDTO)
def validar_cpf(
    body: ValorBrutoDTO,
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> CpfDTO:
    return _validar(Campo.CPF, service.cpf, body.valor)


@router.post("/validacao/email", response_model=EmailDTO)
def validar_email(
    body: ValorBrutoDTO,
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> EmailDTO:
    return _validar(Campo.EMAIL, service.email, body.valor)


@router.post("/validacao/nome", response_model=NomeDTO)
def validar_nome(
    body: ValorBrutoDTO,
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> NomeDTO:
    return _validar(Campo.NOME, service.nome, body.valor)


@router.post("/verificacao/{campo}", response_model=VerificacaoDTO)
def verificar(
    campo: Campo,
    body: ValorBrutoDTO,
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> VerificacaoDTO:
    return service.verificar(campo, body.valor)
