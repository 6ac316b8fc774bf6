"""
Receipt API endpoints.

POST /receipts/process        — register a receipt → {"id": ...}
GET  /receipts/{id}/points    — points earned by a registered receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.errors import ReceiptNotFoundError
from app.schemas import PointsResponse, Receipt, ReceiptIdResponse
from app.service import get_points, register_receipt
from app.store import BaseReceiptStore

logger = logging.getLogger(__name__)
router = APIRouter()


def get_store(request: Request) -> BaseReceiptStore:
    """Receipt store dependency (created in the app lifespan)."""
    return request.app.state.store


# ── POST /receipts/process ───────────────────────────────────────────────
@router.post("/receipts/process", response_model=ReceiptIdResponse)
def process_receipt(receipt: Receipt, store: BaseReceiptStore = Depends(get_store)):
    receipt_id = register_receipt(store, receipt)
    return ReceiptIdResponse(id=receipt_id)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def receipt_points(receipt_id: str, store: BaseReceiptStore = Depends(get_store)):
    try:
        points = get_points(store, receipt_id)
    except ReceiptNotFoundError:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)
