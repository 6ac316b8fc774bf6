import logging
import threading

from app.errors import ReceiptNotFoundError
from app.schemas import Receipt
from app.store.base import BaseReceiptStore, IdFactory, new_receipt_id

logger = logging.getLogger(__name__)


class MemoryReceiptStore(BaseReceiptStore):
    """Process-local store: a dict guarded by a single lock."""

    def __init__(self, id_factory: IdFactory = new_receipt_id):
        super().__init__(id_factory)
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt: Receipt) -> str:
        receipt_id = self._id_factory()
        with self._lock:
            self._receipts[receipt_id] = receipt
        logger.info("Stored receipt %s", receipt_id)
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
