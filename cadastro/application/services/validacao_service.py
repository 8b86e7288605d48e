# cadastro/application/services/validacao_service.py
from __future__ import annotations

from cadastro.application.dtos.funcionario_dto import StatusFuncionarioDTO
from cadastro.application.dtos.validacao_dto import (
    Campo,
    CpfDTO,
    EmailDTO,
    NomeDTO,
    VerificacaoDTO,
)
from cadastro.domain.contato.value_objects import Email
from cadastro.domain.funcionario.value_objects import EmployeeStatus
from cadastro.domain.pessoa.value_objects import CPF, FullName

_PREDICADOS = {
    Campo.CPF: CPF.is_valid,
    Campo.EMAIL: Email.is_valid,
    Campo.NOME: FullName.is_valid,
}


class ValidacaoService:
    """Converte valores brutos em formas canonicas. ValidationError propaga sem tratamento."""

    def cpf(self, raw: str) -> CpfDTO:
        cpf = CPF(raw)
        return CpfDTO(raw=cpf.raw, formatted=cpf.formatted)

    def email(self, raw: str) -> EmailDTO:
        email = Email(raw)
        return EmailDTO(
            raw=email.raw,
            formatted=email.formatted,
            dominio=email.get_domain(),
            usuario=email.get_username(),
        )

    def nome(self, raw: str) -> NomeDTO:
        nome = FullName(raw)
        return NomeDTO(
            raw=nome.raw,
            formatted=nome.formatted,
            primeiro_nome=nome.get_first_name(),
            ultimo_nome=nome.get_last_name(),
        )

    def verificar(self, campo: Campo, raw: str) -> VerificacaoDTO:
        return VerificacaoDTO(campo=campo, valido=_PREDICADOS[campo](raw))

    def status_funcionario(self) -> list[StatusFuncionarioDTO]:
        return [StatusFuncionarioDTO(codigo=s.name, label=s.label) for s in EmployeeStatus]
