"""Routes for the `/clientes` resource.

Handlers go through `ClientService`. A lookup miss is the only error
condition handled here and answers 404 with an empty body.
"""

from typing import List
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlmodel import Session
from ..database import get_session
from .. import models, services
from ..schemas import ClientIn

router = APIRouter(prefix="/clientes", tags=["clientes"])


@router.get("", response_model=List[models.Client])
def find_all(db: Session = Depends(get_session)):
    """List every client."""
    return services.ClientService(db).find_all()


@router.get("/{client_id}", response_model=models.Client)
def find_by_id(client_id: int, db: Session = Depends(get_session)):
    client = services.ClientService(db).find_by_id(client_id)
    if client is None:
        return Response(status_code=404)
    return client


@router.post("", response_model=models.Client)
def save(payload: ClientIn, db: Session = Depends(get_session)):
    """Create a client, or replace the one whose `id` is given."""
    return services.ClientService(db).save(models.Client(**payload.model_dump()))


@router.delete("/{client_id}", status_code=204)
def delete(client_id: int, db: Session = Depends(get_session)):
    """Delete a client. Answers 204 whether or not the row existed."""
    services.ClientService(db).delete(client_id)
    return Response(status_code=204)
