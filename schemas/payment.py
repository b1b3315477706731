# schemas/payment.py
"""
Pydantic schemas for rent payments.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.payment import PaymentStatus


class PaymentCreate(BaseModel):
     """Request body for recording a payment against a tenant."""

     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Amount paid")
     status: PaymentStatus = Field(default=PaymentStatus.COMPLETED)
     method: Optional[str] = Field(None, max_length=50, description="cash, bank_transfer, card, ...")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 1200.00,
                    "status": "COMPLETED",
                    "method": "bank_transfer",
               }
          }
     )


class PaymentResponse(BaseModel):
     id: int
     tenant_id: int
     amount: Decimal
     status: PaymentStatus
     method: Optional[str] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
