import pytest
from fastapi.testclient import TestClient

from src.app import create_app
from src.store.receipt_store import ReceiptStore
from tests.helpers import CORNER_MARKET_PAYLOAD, TARGET_PAYLOAD, receipt_from_payload


@pytest.fixture
def target_receipt():
    return receipt_from_payload(TARGET_PAYLOAD)


@pytest.fixture
def corner_market_receipt():
    return receipt_from_payload(CORNER_MARKET_PAYLOAD)


@pytest.fixture
def store():
    return ReceiptStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
