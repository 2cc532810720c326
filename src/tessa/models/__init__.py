"""
ORM Models package.

This package contains the SQLAlchemy ORM models of the account store.
All models are imported here to ensure proper model registration with
SQLAlchemy before tables are created.

Usage:
    from models import Owner, User
    from models.base import Base
    from models.enums import UserRole
"""

from models.base import Base, TimestampMixin
from models.enums import OwnerRole, UserRole
from models.owner import Owner
from models.user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "OwnerRole",
    "UserRole",
    "Owner",
    "User",
]
