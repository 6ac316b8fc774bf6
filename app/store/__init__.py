"""
Receipt stores.

``build_store`` picks the backend named by ``settings.RECEIPT_STORE``.
"""
from app.config import Settings
from app.database import create_db_engine
from app.store.base import BaseReceiptStore, new_receipt_id
from app.store.memory import MemoryReceiptStore
from app.store.sql import SqlReceiptStore

__all__ = [
    "BaseReceiptStore",
    "MemoryReceiptStore",
    "SqlReceiptStore",
    "build_store",
    "new_receipt_id",
]


def build_store(settings: Settings) -> BaseReceiptStore:
    backend = settings.RECEIPT_STORE.lower()
    if backend == "memory":
        return MemoryReceiptStore()
    if backend == "sql":
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)
        return SqlReceiptStore(engine)
    raise ValueError(f"Unknown RECEIPT_STORE backend: {settings.RECEIPT_STORE!r}")
