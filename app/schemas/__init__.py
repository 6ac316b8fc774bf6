from app.schemas.receipt import Item, PointsResponse, Receipt, ReceiptIdResponse

__all__ = ["Item", "PointsResponse", "Receipt", "ReceiptIdResponse"]
