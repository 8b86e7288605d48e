# cadastro/application/dtos/funcionario_dto.py
from pydantic import BaseModel


class StatusFuncionarioDTO(BaseModel):
    codigo: str
    label: str
