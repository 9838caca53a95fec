# core/store.py

"""
In-memory entity store for every tenant-scoped collection.

One instance is created by the application factory and handed to request
handlers through dependencies.store.get_store. Nothing here validates
payloads; the pydantic request models do that before a mutation is invoked.
"""

import uuid
from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from core.errors import DuplicateError, InvalidTransitionError, NotFoundError
from core.logging_config import logger
from models.condominium import Condominium
from models.enums import ResidentStatus, TransactionType
from models.meeting import Meeting
from models.message import ChatMessage
from models.notice import Notice
from models.provider import Provider
from models.resident import Resident
from models.transaction import Transaction


def new_id() -> str:
    """Collision-free identifier (replaces wall-clock millisecond ids)."""
    return uuid.uuid4().hex


class EntityStore:
    """
    Holds every collection of the dashboard.

    Thread-safe for concurrent access: FastAPI runs sync endpoints on a
    thread pool, so every mutation happens under a single lock.
    """

    def __init__(self):
        self.condos: List[Condominium] = []
        self.residents: List[Resident] = []
        self.providers: List[Provider] = []
        self.meetings: List[Meeting] = []
        self.notices: List[Notice] = []
        self.transactions: List[Transaction] = []
        self.messages: List[ChatMessage] = []
        self._lock = Lock()

    @classmethod
    def seeded(cls) -> "EntityStore":
        """Store preloaded with the sample condominiums and their data."""
        from core.seed import load_sample_data

        store = cls()
        load_sample_data(store)
        return store

    # ============================================================
    # Internal helpers
    # ============================================================
    @staticmethod
    def _find(items: List[Any], record_id: str) -> Optional[Any]:
        for item in items:
            if item.id == record_id:
                return item
        return None

    @staticmethod
    def _merge(record: BaseModel, fields: Dict[str, Any], protected: tuple = ()) -> BaseModel:
        for key, value in fields.items():
            if key in protected or key == "id":
                continue
            if key not in type(record).model_fields:
                continue
            setattr(record, key, value)
        return record

    # ============================================================
    # Condominiums
    # ============================================================
    def add_condo(self, data: Dict[str, Any]) -> Condominium:
        with self._lock:
            condo = Condominium(id=data.get("id") or new_id(), **{k: v for k, v in data.items() if k != "id"})
            self.condos.append(condo)
        logger.info(f"Condominium {condo.id} ({condo.name}) added")
        return condo

    def get_condo(self, condo_id: str) -> Condominium:
        condo = self._find(self.condos, condo_id)
        if condo is None:
            raise NotFoundError("Condomínio não encontrado.")
        return condo

    def first_condo(self) -> Optional[Condominium]:
        return self.condos[0] if self.condos else None

    # ============================================================
    # Residents
    # ============================================================
    def add_resident(self, condo_id: str, data: Dict[str, Any]) -> Resident:
        with self._lock:
            resident = Resident(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                **{k: v for k, v in data.items() if k not in ("id", "condo_id")},
            )
            self.residents.append(resident)
        logger.info(f"Resident {resident.id} added to condo {condo_id} ({resident.status})")
        return resident

    def find_resident(self, resident_id: str) -> Optional[Resident]:
        return self._find(self.residents, resident_id)

    def get_resident(self, resident_id: str) -> Resident:
        resident = self.find_resident(resident_id)
        if resident is None:
            raise NotFoundError("Morador não encontrado.")
        return resident

    def find_resident_by_email(self, email: str) -> Optional[Resident]:
        wanted = (email or "").strip().lower()
        if not wanted:
            return None
        for resident in self.residents:
            if resident.email.strip().lower() == wanted:
                return resident
        return None

    def ensure_email_available(self, email: str, exclude_id: Optional[str] = None) -> None:
        """Email is the login key; two residents may not share it."""
        owner = self.find_resident_by_email(email)
        if owner is not None and owner.id != exclude_id:
            raise DuplicateError("Já existe um cadastro com este email.")

    def update_resident(self, resident_id: str, fields: Dict[str, Any]) -> Resident:
        """Merge the supplied fields; condo_id and status never change here."""
        with self._lock:
            resident = self.get_resident(resident_id)
            self._merge(resident, fields, protected=("condo_id", "status"))
        logger.info(f"Resident {resident_id} updated ({', '.join(sorted(fields)) or 'no fields'})")
        return resident

    def approve_resident(self, resident_id: str) -> Resident:
        with self._lock:
            resident = self.get_resident(resident_id)
            if resident.status != ResidentStatus.pending:
                raise InvalidTransitionError("Apenas cadastros pendentes podem ser aprovados.")
            resident.status = ResidentStatus.active
        logger.info(f"Resident {resident_id} approved")
        return resident

    def remove_resident(self, resident_id: str) -> bool:
        """
        Remove a pending resident (rejection).

        Returns False when the id is already absent so repeated rejects are
        harmless. Active residents cannot be removed.
        """
        with self._lock:
            resident = self._find(self.residents, resident_id)
            if resident is None:
                return False
            if resident.status != ResidentStatus.pending:
                raise InvalidTransitionError("Apenas cadastros pendentes podem ser recusados.")
            self.residents.remove(resident)
        logger.info(f"Resident {resident_id} rejected and removed")
        return True

    def list_residents(self, condo_id: str, status: Optional[ResidentStatus] = ResidentStatus.active) -> List[Resident]:
        return [
            r for r in self.residents
            if r.condo_id == condo_id and (status is None or r.status == status)
        ]

    # ============================================================
    # Providers
    # ============================================================
    def add_provider(self, condo_id: str, data: Dict[str, Any]) -> Provider:
        with self._lock:
            provider = Provider(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                **{k: v for k, v in data.items() if k not in ("id", "condo_id")},
            )
            self.providers.append(provider)
        logger.info(f"Provider {provider.id} added to condo {condo_id}")
        return provider

    def get_provider(self, provider_id: str) -> Provider:
        provider = self._find(self.providers, provider_id)
        if provider is None:
            raise NotFoundError("Prestador não encontrado.")
        return provider

    def update_provider(self, provider_id: str, fields: Dict[str, Any]) -> Provider:
        with self._lock:
            provider = self.get_provider(provider_id)
            self._merge(provider, fields, protected=("condo_id",))
        logger.info(f"Provider {provider_id} updated")
        return provider

    def list_providers(self, condo_id: str, active_only: bool = False) -> List[Provider]:
        return [
            p for p in self.providers
            if p.condo_id == condo_id and (p.active or not active_only)
        ]

    # ============================================================
    # Meetings (immutable once created)
    # ============================================================
    def add_meeting(self, condo_id: str, data: Dict[str, Any]) -> Meeting:
        with self._lock:
            meeting = Meeting(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                **{k: v for k, v in data.items() if k not in ("id", "condo_id")},
            )
            self.meetings.append(meeting)
        logger.info(f"Meeting {meeting.id} scheduled for {meeting.date.isoformat()} in condo {condo_id}")
        return meeting

    def list_meetings(self, condo_id: str) -> List[Meeting]:
        return [m for m in self.meetings if m.condo_id == condo_id]

    # ============================================================
    # Notices (append-only, newest first)
    # ============================================================
    def add_notice(self, condo_id: str, data: Dict[str, Any]) -> Notice:
        with self._lock:
            notice = Notice(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                date=data.get("date") or datetime.now(),
                **{k: v for k, v in data.items() if k not in ("id", "condo_id", "date")},
            )
            self.notices.insert(0, notice)
        logger.info(f"Notice {notice.id} published in condo {condo_id}")
        return notice

    def list_notices(self, condo_id: str) -> List[Notice]:
        return [n for n in self.notices if n.condo_id == condo_id]

    # ============================================================
    # Transactions (append-only, newest first)
    # ============================================================
    def add_transaction(self, condo_id: str, data: Dict[str, Any]) -> Transaction:
        with self._lock:
            transaction = Transaction(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                **{k: v for k, v in data.items() if k not in ("id", "condo_id")},
            )
            self.transactions.insert(0, transaction)
        logger.info(f"Transaction {transaction.id} ({transaction.type}) recorded in condo {condo_id}")
        return transaction

    def list_transactions(self, condo_id: str, type: Optional[TransactionType] = None) -> List[Transaction]:
        return [
            t for t in self.transactions
            if t.condo_id == condo_id and (type is None or t.type == type)
        ]

    # ============================================================
    # Chat messages
    # ============================================================
    def add_message(self, condo_id: str, resident_id: str, data: Dict[str, Any]) -> ChatMessage:
        with self._lock:
            message = ChatMessage(
                id=data.get("id") or new_id(),
                condo_id=condo_id,
                resident_id=resident_id,
                timestamp=data.get("timestamp") or datetime.now(),
                **{k: v for k, v in data.items() if k not in ("id", "condo_id", "resident_id", "timestamp")},
            )
            self.messages.append(message)
        return message

    def update_message(self, message_id: str, fields: Dict[str, Any]) -> ChatMessage:
        with self._lock:
            message = self._find(self.messages, message_id)
            if message is None:
                raise NotFoundError("Mensagem não encontrada.")
            self._merge(message, fields, protected=("condo_id", "resident_id"))
        return message

    def mark_read(self, condo_id: str, resident_id: str, sent_by_manager: bool) -> int:
        """Flip read=True on one direction of a thread; returns how many changed."""
        marked = 0
        with self._lock:
            for message in self.messages:
                if (
                    message.condo_id == condo_id
                    and message.resident_id == resident_id
                    and message.sent_by_manager == sent_by_manager
                    and not message.read
                ):
                    message.read = True
                    marked += 1
        return marked

    def thread(self, condo_id: str, resident_id: str) -> List[ChatMessage]:
        """Messages of one thread in append order."""
        return [
            m for m in self.messages
            if m.condo_id == condo_id and m.resident_id == resident_id
        ]

    def messages_for_condo(self, condo_id: str) -> List[ChatMessage]:
        return [m for m in self.messages if m.condo_id == condo_id]
