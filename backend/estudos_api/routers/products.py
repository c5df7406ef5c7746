"""Routes for the `/produtos` resource.

Only listing and creation are exposed; there is no fetch-by-id, update
or delete route for products.
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from ..database import get_session
from .. import models, repositories
from ..schemas import ProductIn

router = APIRouter(prefix="/produtos", tags=["produtos"])


@router.get("", response_model=List[models.Product])
def get_all_products(db: Session = Depends(get_session)):
    return repositories.ProductRepository(db).find_all()


@router.post("", response_model=models.Product)
def create(payload: ProductIn, db: Session = Depends(get_session)):
    """Persist a product and return it with its generated id."""
    return repositories.ProductRepository(db).save(models.Product(**payload.model_dump()))
