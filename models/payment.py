# models/payment.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base


class PaymentStatus(str, enum.Enum):
     """Enumeration for rent payment status."""
     PENDING = "PENDING"
     COMPLETED = "COMPLETED"
     FAILED = "FAILED"


class Payment(Base):
     """
     Payment model - a rent payment made by a tenant.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     tenant_id = Column(
          Integer,
          ForeignKey("tenants.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     amount = Column(Numeric(12, 2), nullable=False)
     status = Column(
          Enum(PaymentStatus, name="payment_status", create_constraint=True),
          default=PaymentStatus.PENDING,
          nullable=False
     )
     method = Column(String(50), nullable=True)  # cash, bank_transfer, card, ...

     created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)

     # Relationships
     tenant = relationship("Tenant", back_populates="payments")

     def __repr__(self):
          return f"<Payment(id={self.id}, amount={self.amount}, status='{self.status}')>"
