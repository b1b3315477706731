# routers/payments.py
"""
Rent payment API.

POST /api/tenants/{tenant_id}/payments: record a payment made by a tenant.
GET  /api/tenants/{tenant_id}/payments: the tenant's payment history.
Payment processing itself happens outside this service; only the record is kept.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import desc
from sqlalchemy.orm import Session

from auth import get_current_user_id
from database import get_session
from models import Payment
from schemas.payment import PaymentCreate, PaymentResponse
from services.access import get_owned_tenant

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tenants/{tenant_id}/payments", tags=["payments"])


@router.post(
     "",
     response_model=PaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record payment"
)
def record_payment(
     tenant_id: int,
     body: PaymentCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id),
):
     tenant = get_owned_tenant(db, user_id, tenant_id)
     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Tenant not found",
          )

     payment = Payment(tenant_id=tenant.id, **body.model_dump())
     db.add(payment)
     db.commit()
     db.refresh(payment)

     logger.info("Payment %s of %s recorded for tenant %s", payment.id, payment.amount, tenant.id)
     return PaymentResponse.model_validate(payment)


@router.get(
     "",
     response_model=List[PaymentResponse],
     summary="List tenant payments"
)
def list_payments(
     tenant_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id),
):
     tenant = get_owned_tenant(db, user_id, tenant_id)
     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Tenant not found",
          )

     payments = (
          db.query(Payment)
          .filter(Payment.tenant_id == tenant.id)
          .order_by(desc(Payment.created_at), desc(Payment.id))
          .all()
     )
     return [PaymentResponse.model_validate(p) for p in payments]
