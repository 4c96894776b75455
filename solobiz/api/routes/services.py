from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from solobiz.core.dependencies import get_db
from solobiz.schemas.common import CreatedResponse, SuccessResponse
from solobiz.schemas.service import ServiceCreate, ServiceResponse, ServiceStatusUpdate
from solobiz.services.billing_service import (
    create_service,
    list_services,
    update_service_status,
)

router = APIRouter(prefix="/api/services", tags=["Services"])


@router.get("", response_model=List[ServiceResponse])
def get_services(db: Session = Depends(get_db)):
    return list_services(db)


@router.post("", response_model=CreatedResponse)
def add_service(payload: ServiceCreate, db: Session = Depends(get_db)):
    return {"id": create_service(db, payload)}


@router.patch("/{service_id}", response_model=SuccessResponse)
def change_service_status(
    service_id: int,
    payload: ServiceStatusUpdate,
    db: Session = Depends(get_db),
):
    update_service_status(db, service_id, payload)
    return {"success": True}
