from dataclasses import dataclass

from src.model.ReceiptModel import Receipt


@dataclass(frozen=True)
class StoredReceipt:
    id: str
    receipt: Receipt
