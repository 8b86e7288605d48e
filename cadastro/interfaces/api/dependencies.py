# cadastro/interfaces/api/dependencies.py
from cadastro.application.services.validacao_service import ValidacaoService


def get_validacao_service() -> ValidacaoService:
    return ValidacaoService()
