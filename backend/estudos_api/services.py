"""Service classes used by HTTP controllers.

Services are intentionally thin. `ClientService` adds no policy of its
own: it is the indirection point between the `/clientes` routes and
`ClientRepository`.
"""

from typing import List, Optional
from sqlmodel import Session
from . import models, repositories


class ClientService:
    """Pass-through over `ClientRepository`."""
    def __init__(self, session: Session):
        self.session = session
        self.client_repo = repositories.ClientRepository(session)

    def find_all(self) -> List[models.Client]:
        return self.client_repo.find_all()

    def find_by_id(self, client_id: int) -> Optional[models.Client]:
        return self.client_repo.find_by_id(client_id)

    def save(self, client: models.Client) -> models.Client:
        return self.client_repo.save(client)

    def delete(self, client_id: int) -> None:
        self.client_repo.delete(client_id)
