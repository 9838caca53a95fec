from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """Who is looking at the dashboard."""

    sindico = "SINDICO"   # condominium manager
    morador = "MORADOR"   # resident


# -----------------------------------------------------
# RESIDENT TYPE
# -----------------------------------------------------
class ResidentType(BaseStrEnum):
    owner = "Proprietário"
    tenant = "Inquilino"
    resident = "Morador"


# -----------------------------------------------------
# RESIDENT STATUS
# -----------------------------------------------------
class ResidentStatus(BaseStrEnum):
    """Approval lifecycle: pending -> active (rejection removes the record)."""

    pending = "pending"
    active = "active"


# -----------------------------------------------------
# NOTICE CATEGORY
# -----------------------------------------------------
class NoticeCategory(BaseStrEnum):
    urgent = "Urgente"
    maintenance = "Manutenção"
    event = "Evento"
    general = "Aviso Geral"


# -----------------------------------------------------
# TRANSACTION TYPE
# -----------------------------------------------------
class TransactionType(BaseStrEnum):
    income = "Receita"
    expense = "Despesa"
