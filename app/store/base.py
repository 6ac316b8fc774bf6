"""
Receipt store contract.
"""
import abc
import uuid
from typing import Callable

from app.schemas import Receipt

IdFactory = Callable[[], str]


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class BaseReceiptStore(metaclass=abc.ABCMeta):
    """Write-once mapping of identifier → receipt.

    ``put`` and ``get`` are safe to call from many threads; a receipt is
    visible to every ``get`` issued after its ``put`` returns.
    """

    def __init__(self, id_factory: IdFactory = new_receipt_id):
        self._id_factory = id_factory

    @abc.abstractmethod
    def put(self, receipt: Receipt) -> str:
        """Store ``receipt`` under a fresh identifier and return it."""

    @abc.abstractmethod
    def get(self, receipt_id: str) -> Receipt:
        """Return the stored receipt or raise ``ReceiptNotFoundError``."""
