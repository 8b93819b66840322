from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt

TARGET_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_PAYLOAD = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def make_receipt(retailer="", purchase_date="2022-01-02", purchase_time="10:00", items=(), total="0.01"):
    """Receipt that scores zero on every rule unless overridden."""
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        items=tuple(ReceiptItem(short_description=d, price=p) for d, p in items),
        total=total,
    )


def receipt_from_payload(payload):
    return make_receipt(
        retailer=payload["retailer"],
        purchase_date=payload["purchaseDate"],
        purchase_time=payload["purchaseTime"],
        items=[(i["shortDescription"], i["price"]) for i in payload["items"]],
        total=payload["total"],
    )
