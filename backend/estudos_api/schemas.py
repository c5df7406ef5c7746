"""Pydantic request schemas used by the API.

Schemas keep API input shapes stable. They carry no validation beyond
field types; every field is optional so any JSON object is accepted.
"""

from pydantic import BaseModel
from typing import Optional


class ClientIn(BaseModel):
    """Payload for `POST /clientes`.

    Supplying `id` replaces the stored client with that id.
    """
    id: Optional[int] = None
    nome: Optional[str] = None
    email: Optional[str] = None


class ProductIn(BaseModel):
    """Payload for `POST /produtos`."""
    id: Optional[int] = None
    nome: Optional[str] = None
    preco: Optional[float] = None
