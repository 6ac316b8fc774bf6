"""
Error taxonomy for the receipt service.

Unparseable receipt fields are not errors: the affected rule scores 0.
The only condition surfaced to callers is an unknown receipt identifier.
"""


class ReceiptPointsError(Exception):
    """Base class for errors raised by the receipt service."""


class ReceiptNotFoundError(ReceiptPointsError, LookupError):
    """No receipt is registered under the given identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt not found: {receipt_id}")
        self.receipt_id = receipt_id
