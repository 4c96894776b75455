from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from solobiz.core.dependencies import get_db
from solobiz.schemas.client import ClientCreate, ClientDetailResponse, ClientResponse
from solobiz.schemas.common import CreatedResponse, SuccessResponse
from solobiz.services.client_service import (
    create_client,
    delete_client,
    get_client_detail,
    list_clients,
)

router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("", response_model=List[ClientResponse])
def get_clients(
    search: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_clients(db, search)


@router.post("", response_model=CreatedResponse)
def add_client(payload: ClientCreate, db: Session = Depends(get_db)):
    return {"id": create_client(db, payload)}


@router.get("/{client_id}", response_model=ClientDetailResponse)
def get_client(client_id: int, db: Session = Depends(get_db)):
    return get_client_detail(db, client_id)


@router.delete("/{client_id}", response_model=SuccessResponse)
def remove_client(client_id: int, db: Session = Depends(get_db)):
    delete_client(db, client_id)
    return {"success": True}
