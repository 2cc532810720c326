"""
Owner Service

CRUD operations for owner accounts in the account store. Writes are only
ever issued by the account orchestrator, which pairs them with the
identity provider.
"""

from typing import Any, Dict, Mapping

from models.enums import OwnerRole
from models.owner import Owner
from repositories.owner_repository import OwnerRepository
from services.base_service import BaseService

OWNER_FIELDS = ("id", "name", "email", "role", "created_at", "updated_at")


class OwnerService(BaseService):
    """Account service for owners."""

    def __init__(self, repository: OwnerRepository):
        super().__init__("OWNER_SERVICE")
        self.repository = repository

    def create(self, record: Mapping[str, Any]) -> Owner:
        """
        Persist a new owner.

        Args:
            record: Owner fields; ``id`` is required, ``password`` is ignored

        Returns:
            The stored owner

        Raises:
            DuplicateException: If an owner already uses the email
        """
        data = {key: record[key] for key in OWNER_FIELDS if record.get(key) is not None}
        data["role"] = OwnerRole.OWNER.value

        with self._timed_operation("create"):
            owner = self.repository.create_owner(data)

        self.logger.info(f"Owner {owner.id} created")
        return owner

    def get_by_id(self, id: str) -> Owner:
        """
        Raises:
            NotFoundException: If no owner has the id
        """
        with self._timed_operation("get_by_id"):
            return self.repository.get_or_fail(id)

    def delete(self, id: str) -> None:
        """
        Raises:
            NotFoundException: If no owner has the id
        """
        with self._timed_operation("delete"):
            owner = self.repository.get_or_fail(id)
            self.repository.delete(owner)

        self.logger.info(f"Owner {id} deleted")

    @staticmethod
    def snapshot(owner: Owner) -> Dict[str, Any]:
        """Copy the persisted fields of an owner, enough to recreate it as-is."""
        return {field: getattr(owner, field) for field in OWNER_FIELDS}
