# routers/units.py
"""
Unit API routes. Units are always reached through a property the current
user owns.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload

from auth import get_current_user_id
from database import get_session
from models import Unit
from schemas.unit import UnitCreate, UnitResponse, UnitUpdate
from services.access import get_owned_property, get_owned_unit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["units"])


def _unit_or_404(db: Session, user_id: str, unit_id: int) -> Unit:
     unit = get_owned_unit(db, user_id, unit_id)
     if not unit:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Unit not found"
          )
     return unit


@router.post(
     "/api/properties/{property_id}/units",
     response_model=UnitResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Add a unit to a property"
)
def create_unit(
     property_id: int,
     unit_data: UnitCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     prop = get_owned_property(db, user_id, property_id)
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     unit = Unit(property_id=prop.id, **unit_data.model_dump())
     db.add(unit)
     db.commit()
     db.refresh(unit)

     return UnitResponse.model_validate(unit)


@router.get(
     "/api/properties/{property_id}/units",
     response_model=List[UnitResponse],
     summary="List units of a property"
)
def list_units(
     property_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     prop = get_owned_property(db, user_id, property_id)
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     units = (
          db.query(Unit)
          .options(joinedload(Unit.tenant))
          .filter(Unit.property_id == prop.id)
          .order_by(Unit.id)
          .all()
     )
     return [UnitResponse.model_validate(unit) for unit in units]


@router.patch(
     "/api/units/{unit_id}",
     response_model=UnitResponse,
     summary="Update unit"
)
def update_unit(
     unit_id: int,
     unit_data: UnitUpdate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Update unit details. Occupancy status is not editable here; it follows
     tenant assignment.
     """
     unit = _unit_or_404(db, user_id, unit_id)

     for field, value in unit_data.model_dump(exclude_unset=True).items():
          if value is not None:
               setattr(unit, field, value)

     db.commit()
     db.refresh(unit)

     return UnitResponse.model_validate(unit)


@router.delete(
     "/api/units/{unit_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete unit"
)
def delete_unit(
     unit_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """Delete a unit; its tenant (if any) goes with it."""
     unit = _unit_or_404(db, user_id, unit_id)

     db.delete(unit)
     db.commit()

     logger.info("Unit %s deleted by user %s", unit_id, user_id)
     return None
