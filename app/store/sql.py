"""
Transactional receipt store over SQLAlchemy.

Each ``put`` is one committed INSERT; ``get`` rebuilds the ``Receipt`` from
the stored JSON. The default in-memory SQLite database shares one connection
between threads, so sessions are serialized through a lock.
"""
import logging
import threading
from datetime import datetime, timezone

from sqlalchemy.engine import Engine

from app.database import Base, create_session_factory
from app.errors import ReceiptNotFoundError
from app.models.receipt import ReceiptModel
from app.schemas import Receipt
from app.store.base import BaseReceiptStore, IdFactory, new_receipt_id

logger = logging.getLogger(__name__)


class SqlReceiptStore(BaseReceiptStore):
    def __init__(self, engine: Engine, id_factory: IdFactory = new_receipt_id):
        super().__init__(id_factory)
        self._engine = engine
        self._session_factory = create_session_factory(engine)
        self._lock = threading.Lock()
        Base.metadata.create_all(bind=engine)
        logger.info("Receipt table ready (%s)", engine.url)

    def put(self, receipt: Receipt) -> str:
        receipt_id = self._id_factory()
        record = ReceiptModel(
            id=receipt_id,
            created_at=datetime.now(timezone.utc).isoformat(),
            receipt_json=receipt.model_dump(by_alias=True),
        )
        with self._lock, self._session_factory() as db:
            db.add(record)
            db.commit()
        logger.info("Stored receipt %s", receipt_id)
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock, self._session_factory() as db:
            row = db.query(ReceiptModel).filter(ReceiptModel.id == receipt_id).first()
            data = row.receipt_json if row else None
        if data is None:
            raise ReceiptNotFoundError(receipt_id)
        return Receipt.model_validate(data)

    def close(self) -> None:
        self._engine.dispose()
