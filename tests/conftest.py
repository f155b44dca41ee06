# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.ticket.schemas import Ticket, TicketStatus
from app.ticket.store import InMemoryKitchenStore


@pytest.fixture
def seed_tickets() -> list[Ticket]:
    return [
        Ticket(id=1, status=TicketStatus.ACCEPTED, items=["burger", "fries"]),
        Ticket(id=2, status=TicketStatus.PENDING, items=["pizza", "water"]),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(STORE_BACKEND="memory", CORS_ORIGINS=None, REJECT_UNSUPPORTED_METHODS=False)


@pytest.fixture
def store(seed_tickets: list[Ticket]) -> InMemoryKitchenStore:
    return InMemoryKitchenStore(seed_tickets)


@pytest.fixture
def client(settings: Settings, store: InMemoryKitchenStore) -> TestClient:
    return TestClient(create_app(settings, store))


@pytest.fixture
def empty_store() -> InMemoryKitchenStore:
    return InMemoryKitchenStore()


@pytest.fixture
def empty_client(settings: Settings, empty_store: InMemoryKitchenStore) -> TestClient:
    return TestClient(create_app(settings, empty_store))
