"""
SQLAlchemy model for receipt persistence.
"""
from sqlalchemy import Column, JSON, String

from app.database import Base


class ReceiptModel(Base):
    __tablename__ = "receipts"

    id = Column(String, primary_key=True)
    created_at = Column(String, nullable=False)
    receipt_json = Column(JSON, nullable=False)
