# app/ticket/store.py
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.core.config import Settings
from app.core.database import create_db_engine, create_session_factory
from app.core.errors import StorageError, TicketNotFound
from app.ticket.models import TicketRecord
from app.ticket.schemas import Ticket

logger = logging.getLogger(__name__)


class KitchenStore(ABC):
    """Where tickets live. IDs are always handed out by the store."""

    @abstractmethod
    def get_ticket_by_id(self, ticket_id: int) -> Ticket:
        """Return the ticket or raise TicketNotFound."""

    @abstractmethod
    def store_ticket(self, ticket: Ticket) -> int:
        """Persist a new ticket and return its ID, or raise StorageError."""


class InMemoryKitchenStore(KitchenStore):
    # Not safe for concurrent writers.

    def __init__(self, tickets: Iterable[Ticket] = ()) -> None:
        self._tickets: dict[int, Ticket] = {t.id: t.model_copy(deep=True) for t in tickets}

    def get_ticket_by_id(self, ticket_id: int) -> Ticket:
        ticket = self._tickets.get(ticket_id)
        if ticket is None:
            raise TicketNotFound(ticket_id)
        return ticket.model_copy(deep=True)

    def store_ticket(self, ticket: Ticket) -> int:
        ticket_id = max(self._tickets, default=0) + 1
        self._tickets[ticket_id] = ticket.model_copy(update={"id": ticket_id}, deep=True)
        return ticket_id

    def __len__(self) -> int:
        return len(self._tickets)


def _to_ticket(record: TicketRecord) -> Ticket:
    return Ticket(id=record.id, status=record.status, items=list(record.items))


class SqlKitchenStore(KitchenStore):
    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def get_ticket_by_id(self, ticket_id: int) -> Ticket:
        with self._session_factory() as db:
            try:
                record = db.get(TicketRecord, ticket_id)
            except SQLAlchemyError as exc:
                # a failed read is reported like a missing ticket
                logger.error("failed to fetch ticket", extra={"ticket_id": ticket_id}, exc_info=True)
                raise TicketNotFound(ticket_id) from exc
            if record is None:
                raise TicketNotFound(ticket_id)
            return _to_ticket(record)

    def store_ticket(self, ticket: Ticket) -> int:
        record = TicketRecord(status=int(ticket.status), items=list(ticket.items))
        with self._session_factory() as db:
            try:
                db.add(record)
                db.commit()
                db.refresh(record)
            except SQLAlchemyError as exc:
                db.rollback()
                logger.error("failed to store ticket", exc_info=True)
                raise StorageError("unable to store ticket") from exc
            return record.id


def build_store(settings: Settings) -> KitchenStore:
    if settings.STORE_BACKEND == "sql":
        engine = create_db_engine(settings.DATABASE_URL)
        return SqlKitchenStore(create_session_factory(engine))
    return InMemoryKitchenStore()
