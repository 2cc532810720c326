"""
Services package.

Account services over the repositories of the account store.
"""

from services.base_service import BaseService
from services.owner_service import OwnerService
from services.user_service import UserService

__all__ = [
    "BaseService",
    "OwnerService",
    "UserService",
]
