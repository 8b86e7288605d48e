# cadastro/domain/funcionario/value_objects.py
from enum import StrEnum


class EmployeeStatus(StrEnum):
    NORMAL = "Normal"
    VACATION = "Férias"
    DISMISSED = "Demitido"
    TRANSFERRED = "Transferido"
    LEAVE = "Afastado"  # licenca medica, INSS etc.

    @property
    def label(self) -> str:
        return self.value
