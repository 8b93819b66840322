import logging
import re
import threading
from typing import Dict

from src.model.ReceiptModel import Receipt
from src.model.StoredReceiptModel import StoredReceipt

logger = logging.getLogger(__name__)

ID_PATTERN = re.compile(r'\S+')


class ReceiptStoreError(Exception):
    """Base class for receipt store lookup failures."""


class InvalidIdentifier(ReceiptStoreError):
    def __init__(self, receipt_id: str):
        super().__init__(f"Invalid receipt id: {receipt_id!r}")
        self.receipt_id = receipt_id


class ReceiptNotFound(ReceiptStoreError):
    def __init__(self, receipt_id: str):
        super().__init__(f"No receipt found for id: {receipt_id!r}")
        self.receipt_id = receipt_id


def is_valid_id(receipt_id: str) -> bool:
    return bool(ID_PATTERN.fullmatch(receipt_id))


class ReceiptStore:
    """In-memory receipt store.

    Identifiers come from a counter starting at 1, so they are unique and
    ordered by submission. One lock guards both the counter and the map.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: Dict[str, StoredReceipt] = {}
        self._last_id = 0

    def submit(self, receipt: Receipt) -> str:
        with self._lock:
            self._last_id += 1
            receipt_id = str(self._last_id)
            self._records[receipt_id] = StoredReceipt(id=receipt_id, receipt=receipt)
        logger.info("Stored receipt %s from %r", receipt_id, receipt.retailer)
        return receipt_id

    def lookup(self, receipt_id: str) -> Receipt:
        if not is_valid_id(receipt_id):
            raise InvalidIdentifier(receipt_id)

        with self._lock:
            record = self._records.get(receipt_id)

        if record is None:
            logger.info("Receipt %s not found", receipt_id)
            raise ReceiptNotFound(receipt_id)
        return record.receipt

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
