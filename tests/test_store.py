# tests/test_store.py
import pytest

from app.core.config import Settings
from app.core.database import create_db_engine, create_session_factory
from app.core.errors import StorageError, TicketNotFound
from app.ticket.models import TicketRecord
from app.ticket.schemas import Ticket, TicketStatus
from app.ticket.store import InMemoryKitchenStore, KitchenStore, SqlKitchenStore, build_store


@pytest.fixture(params=["memory", "sql"])
def kitchen_store(request) -> KitchenStore:
    if request.param == "memory":
        return InMemoryKitchenStore()
    return SqlKitchenStore(create_session_factory(create_db_engine("sqlite://")))


def test_store_assigns_increasing_ids(kitchen_store: KitchenStore):
    first = kitchen_store.store_ticket(Ticket(items=["burger"]))
    second = kitchen_store.store_ticket(Ticket(items=["fries"]))
    assert first == 1
    assert second == 2


def test_store_ignores_ticket_id(kitchen_store: KitchenStore):
    tid = kitchen_store.store_ticket(Ticket(id=42, items=["soup"]))
    assert tid == 1
    with pytest.raises(TicketNotFound):
        kitchen_store.get_ticket_by_id(42)


def test_fetch_returns_stored_ticket(kitchen_store: KitchenStore):
    tid = kitchen_store.store_ticket(Ticket(status=TicketStatus.COMPLETED, items=["pizza", "water"]))
    got = kitchen_store.get_ticket_by_id(tid)
    assert got == Ticket(id=tid, status=TicketStatus.COMPLETED, items=["pizza", "water"])


def test_fetch_missing_raises_not_found(kitchen_store: KitchenStore):
    with pytest.raises(TicketNotFound) as exc_info:
        kitchen_store.get_ticket_by_id(7)
    assert exc_info.value.ticket_id == 7
    assert exc_info.value.status_code == 404


def test_memory_store_seed_and_next_id():
    store = InMemoryKitchenStore([Ticket(id=5, items=["tea"])])
    assert store.get_ticket_by_id(5).items == ["tea"]
    assert store.store_ticket(Ticket(items=["cake"])) == 6


def test_memory_store_returns_copies():
    store = InMemoryKitchenStore()
    tid = store.store_ticket(Ticket(items=["burger"]))

    got = store.get_ticket_by_id(tid)
    got.items.append("fries")
    assert store.get_ticket_by_id(tid).items == ["burger"]


def test_build_store_picks_backend():
    assert isinstance(build_store(Settings(STORE_BACKEND="memory")), InMemoryKitchenStore)
    assert isinstance(build_store(Settings(STORE_BACKEND="sql", DATABASE_URL="sqlite://")), SqlKitchenStore)


def test_sql_store_failures_map_to_contract_errors():
    engine = create_db_engine("sqlite://")
    store = SqlKitchenStore(create_session_factory(engine))
    TicketRecord.__table__.drop(engine)

    with pytest.raises(TicketNotFound):
        store.get_ticket_by_id(1)
    with pytest.raises(StorageError):
        store.store_ticket(Ticket(items=["burger"]))
