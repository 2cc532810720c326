"""
User Repository

Users are always listed within one owner, oldest first.
"""

from typing import List
from sqlalchemy.orm import Session

from models.user import User
from repositories.base import EmailKeyedRepository


class UserRepository(EmailKeyedRepository[User]):

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_owner(self, owner_id: str) -> List[User]:
        return self.get_by_filter({"owner_id": owner_id}, order_by=("created_at", "id"))

    def create_user(self, user_data: dict) -> User:
        return self.create_unique(user_data)
