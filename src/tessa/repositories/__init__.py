"""
Repositories package.

This package contains the data access layer of the account store,
following the Repository Pattern. Each repository extends BaseRepository
and provides domain-specific data operations.

Usage:
    from repositories import OwnerRepository, UserRepository

    def get_owner(db: Session = Depends(get_db)):
        repo = OwnerRepository(db)
        return repo.get_or_fail(owner_id)
"""

from repositories.base import BaseRepository, EmailKeyedRepository
from repositories.owner_repository import OwnerRepository
from repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "EmailKeyedRepository",
    "OwnerRepository",
    "UserRepository",
]
