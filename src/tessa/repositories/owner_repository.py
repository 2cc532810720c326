"""
Owner Repository
"""

from sqlalchemy.orm import Session

from models.owner import Owner
from repositories.base import EmailKeyedRepository


class OwnerRepository(EmailKeyedRepository[Owner]):

    def __init__(self, db: Session):
        super().__init__(Owner, db)

    def create_owner(self, owner_data: dict) -> Owner:
        return self.create_unique(owner_data)
