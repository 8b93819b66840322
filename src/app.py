import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import ValidationError

from src.config import Settings, configure_logging, load_settings
from src.model.ReceiptModel import Receipt
from src.model.schemas import PointsBreakdownResponse, PointsResponse, ReceiptIdResponse, ReceiptPayload
from src.points.engine import score, score_breakdown
from src.store.receipt_store import InvalidIdentifier, ReceiptNotFound, ReceiptStore

logger = logging.getLogger(__name__)

INVALID_RECEIPT = "The receipt is invalid."
INVALID_ID = "The receipt id is invalid."
RECEIPT_NOT_FOUND = "No receipt found for that ID."


def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store


def decode_receipt(body: bytes) -> Receipt:
    # the body is JSON whatever Content-Type the client sent
    try:
        payload = ReceiptPayload.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected receipt: %s", e.errors(include_url=False))
        raise HTTPException(status_code=400, detail=INVALID_RECEIPT)
    return payload.to_receipt()


def fetch_receipt(store: ReceiptStore, receipt_id: str) -> Receipt:
    try:
        return store.lookup(receipt_id)
    except InvalidIdentifier:
        raise HTTPException(status_code=400, detail=INVALID_ID)
    except ReceiptNotFound:
        raise HTTPException(status_code=404, detail=RECEIPT_NOT_FOUND)


def create_app(store: Optional[ReceiptStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    configure_logging(settings or load_settings())

    app = FastAPI(title="Receipt Processor")
    app.state.store = store if store is not None else ReceiptStore()

    @app.post("/receipts/process", response_model=ReceiptIdResponse)
    async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
        receipt = decode_receipt(await request.body())
        return ReceiptIdResponse(id=store.submit(receipt))

    # ":path" lets an empty id reach the store's syntax check instead of 404ing in routing
    @app.get("/receipts/{receipt_id:path}/points", response_model=PointsResponse)
    def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
        receipt = fetch_receipt(store, receipt_id)
        return PointsResponse(points=score(receipt))

    @app.get("/receipts/{receipt_id:path}/points/breakdown", response_model=PointsBreakdownResponse)
    def get_points_breakdown(receipt_id: str, store: ReceiptStore = Depends(get_store)):
        receipt = fetch_receipt(store, receipt_id)
        return PointsBreakdownResponse.from_breakdown(score_breakdown(receipt))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    uvicorn.run("src.app:app", host=settings.host, port=settings.port, reload=settings.reload,
                log_level=settings.log_level.lower())
