"""
User Service

CRUD operations for manager and employee accounts in the account store.
"""

from typing import Any, Dict, List, Mapping

from models.enums import UserRole
from models.user import User
from repositories.user_repository import UserRepository
from core.exceptions import NotFoundException, ValidationException
from services.base_service import BaseService

USER_FIELDS = ("id", "owner_id", "name", "email", "role", "created_at", "updated_at")


def _coerce_role(role: Any) -> UserRole:
    try:
        return UserRole(role)
    except ValueError as e:
        allowed = ", ".join(r.value for r in UserRole)
        raise ValidationException(f"role must be one of {allowed}") from e


class UserService(BaseService):
    """Account service for users scoped under an owner."""

    def __init__(self, repository: UserRepository):
        super().__init__("USER_SERVICE")
        self.repository = repository

    def create(self, record: Mapping[str, Any]) -> User:
        """
        Persist a new user.

        Args:
            record: User fields; ``id`` and ``owner_id`` are required,
                ``password`` is ignored

        Returns:
            The stored user

        Raises:
            DuplicateException: If a user already uses the email
        """
        data = {key: record[key] for key in USER_FIELDS if record.get(key) is not None}
        data["role"] = _coerce_role(data.get("role", UserRole.EMPLOYEE))

        with self._timed_operation("create"):
            user = self.repository.create_user(data)

        self.logger.info(f"User {user.id} created under owner {user.owner_id}")
        return user

    def get_by_id(self, id: str) -> User:
        """
        Raises:
            NotFoundException: If no user has the id
        """
        with self._timed_operation("get_by_id"):
            return self.repository.get_or_fail(id)

    def get_all_for_owner(self, owner_id: str) -> List[User]:
        """All users of an owner, oldest first; empty when there are none."""
        with self._timed_operation("get_all_for_owner"):
            return self.repository.get_by_owner(owner_id)

    def count_for_owner(self, owner_id: str) -> int:
        with self._timed_operation("count_for_owner"):
            return self.repository.count({"owner_id": owner_id})

    def update_role(self, id: str, role: Any) -> User:
        """
        Set the role of a user. Setting the current role again is allowed.

        Raises:
            NotFoundException: If no user has the id
            ValidationException: If the role is not MANAGER or EMPLOYEE
        """
        new_role = _coerce_role(role)

        with self._timed_operation("update_role"):
            user = self.repository.update_by_id(id, {"role": new_role})

        if user is None:
            raise NotFoundException("User", id)

        self.logger.info(f"User {id} role set to {new_role.value}")
        return user

    def delete(self, id: str) -> None:
        """
        Raises:
            NotFoundException: If no user has the id
        """
        with self._timed_operation("delete"):
            user = self.repository.get_or_fail(id)
            self.repository.delete(user)

        self.logger.info(f"User {id} deleted")

    @staticmethod
    def snapshot(user: User) -> Dict[str, Any]:
        """Copy the persisted fields of a user, enough to recreate it as-is."""
        return {field: getattr(user, field) for field in USER_FIELDS}
