# routers/properties.py
"""
Property API routes.

Every property belongs to the user in the bearer token; properties of other
users are reported as not found.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import desc, func
from sqlalchemy.orm import Session, selectinload

from auth import get_current_user_id
from database import get_session
from models import Property, Unit
from schemas.property import PropertyCreate, PropertyDetailResponse, PropertyResponse, PropertyUpdate
from services.access import get_owned_property

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _property_or_404(db: Session, user_id: str, property_id: int) -> Property:
     prop = get_owned_property(db, user_id, property_id)
     if not prop:
          logger.info("Property %s not found for user %s", property_id, user_id)
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )
     return prop


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Register a property"
)
def create_property(
     property_data: PropertyCreate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Register a new property for the current user.

     - **name** and **address** are required
     - everything else falls back to empty/zero defaults, status AVAILABLE
     """
     prop = Property(user_id=user_id, **property_data.model_dump())
     db.add(prop)
     db.commit()
     db.refresh(prop)

     logger.info("Property %s created by user %s", prop.id, user_id)
     return PropertyResponse.model_validate(prop)


@router.get(
     "",
     response_model=List[PropertyResponse],
     summary="List properties"
)
def list_properties(
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """All of the current user's properties, newest first, with unit counts."""
     unit_counts = (
          db.query(Unit.property_id, func.count(Unit.id))
          .join(Property, Unit.property_id == Property.id)
          .filter(Property.user_id == user_id)
          .group_by(Unit.property_id)
          .all()
     )
     counts = dict(unit_counts)

     properties = (
          db.query(Property)
          .filter(Property.user_id == user_id)
          .order_by(desc(Property.created_at), desc(Property.id))
          .all()
     )
     return [
          PropertyResponse.model_validate(prop).model_copy(update={"unit_count": counts.get(prop.id, 0)})
          for prop in properties
     ]


@router.get(
     "/{property_id}",
     response_model=PropertyDetailResponse,
     summary="Get property by ID"
)
def get_property(
     property_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """Retrieve a property with its units and each unit's tenant."""
     prop = (
          db.query(Property)
          .options(selectinload(Property.units).joinedload(Unit.tenant))
          .filter(Property.id == property_id, Property.user_id == user_id)
          .first()
     )
     if not prop:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="Property not found"
          )

     response = PropertyDetailResponse.model_validate(prop)
     return response.model_copy(update={"unit_count": len(prop.units)})


@router.patch(
     "/{property_id}",
     response_model=PropertyResponse,
     summary="Update property"
)
def update_property(
     property_id: int,
     property_data: PropertyUpdate,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Update an existing property.

     Only provided fields will be updated.
     """
     prop = _property_or_404(db, user_id, property_id)

     for field, value in property_data.model_dump(exclude_unset=True).items():
          if value is not None:
               setattr(prop, field, value)

     db.commit()
     db.refresh(prop)

     return PropertyResponse.model_validate(prop).model_copy(update={"unit_count": len(prop.units)})


@router.delete(
     "/{property_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete property"
)
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     user_id: str = Depends(get_current_user_id)
):
     """
     Delete a property by ID.

     Note: This permanently removes the property together with its units,
     tenants, maintenance requests and document records.
     """
     prop = _property_or_404(db, user_id, property_id)

     db.delete(prop)
     db.commit()

     logger.info("Property %s deleted by user %s", property_id, user_id)
     return None
