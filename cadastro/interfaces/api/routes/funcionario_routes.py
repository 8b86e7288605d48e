# cadastro/interfaces/api/routes/funcionario_routes.py
from fastapi import APIRouter, Depends

from cadastro.application.dtos.funcionario_dto import StatusFuncionarioDTO
from cadastro.application.services.validacao_service import ValidacaoService
from cadastro.interfaces.api.dependencies import get_validacao_service

router = APIRouter()


@router.get("/status-funcionario", response_model=list[StatusFuncionarioDTO])
def listar_status(
    service: ValidacaoService = Depends(get_validacao_service),  # noqa: B008
) -> list[StatusFuncionarioDTO]:
    return service.status_funcionario()
