"""
Enumeration types used across ORM models.

This module centralizes all enum definitions to ensure consistency
across the application and make them easy to import.
"""

import enum


class OwnerRole(str, enum.Enum):
    """
    Role carried by every owner account.

    Attributes:
        OWNER: Top-level tenant account
    """
    OWNER = "OWNER"


class UserRole(str, enum.Enum):
    """
    Roles a user account under an owner may hold.

    Attributes:
        MANAGER: Manages other users of the same owner
        EMPLOYEE: Regular staff account
    """
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"
