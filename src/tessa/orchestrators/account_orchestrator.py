"""
Account Orchestrator

Keeps the account store and the identity provider in step when owner and
user accounts are created or deleted. Neither side offers a transaction
spanning both, so every workflow is an ordered sequence of steps with a
single compensating action:

Create:  START -> LOCAL_CREATED -> IDENTITY_CREATED
                               \\-> ROLLED_BACK | ROLLBACK_FAILED

Delete:  START -> FETCHED -> LOCAL_DELETED -> IDENTITY_DELETED
                                          \\-> RESTORED | RESTORE_FAILED

Each workflow records its progress in a WorkflowOutcome; the terminal
state alone decides what the caller gets back. Errors raised before the
first write (duplicate email, unknown id, an owner that still has
users) reach the caller unchanged.
Nothing is retried.
"""

import enum
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union

from core.exceptions import ConflictException, DataInconsistencyException, OrchestrationException
from integrations.identity_provider import IdentityProviderClient
from models.enums import UserRole
from models.owner import Owner
from models.user import User
from services.owner_service import OwnerService
from services.user_service import UserService

logger = logging.getLogger("ACCOUNT_ORCHESTRATOR")

AccountService = Union[OwnerService, UserService]


class WorkflowState(str, enum.Enum):
    """States of the create and delete workflows."""

    START = "START"

    # Create
    LOCAL_CREATED = "LOCAL_CREATED"
    IDENTITY_CREATED = "IDENTITY_CREATED"
    ROLLED_BACK = "ROLLED_BACK"
    ROLLBACK_FAILED = "ROLLBACK_FAILED"

    # Delete
    FETCHED = "FETCHED"
    LOCAL_DELETED = "LOCAL_DELETED"
    IDENTITY_DELETED = "IDENTITY_DELETED"
    RESTORED = "RESTORED"
    RESTORE_FAILED = "RESTORE_FAILED"


@dataclass
class WorkflowOutcome:
    """Progress of one create or delete workflow."""

    kind: str
    record_id: str
    state: WorkflowState = WorkflowState.START
    record: Any = None
    error: Optional[Exception] = None
    compensation_error: Optional[Exception] = None

    def transition(self, state: WorkflowState) -> None:
        logger.debug(f"{self.kind} {self.record_id}: {self.state.value} -> {state.value}")
        self.state = state

    @property
    def details(self) -> Dict[str, Any]:
        return {"id": self.record_id, "state": self.state.value}


def generate_account_id() -> str:
    return str(uuid.uuid4())


class AccountOrchestrator:
    """
    Coordinates the account services and the identity provider.

    The id of every new account is generated here, before any write, and
    used both as the record's primary key and as the identity's uid.
    """

    def __init__(
        self,
        owner_service: OwnerService,
        user_service: UserService,
        identity_provider: IdentityProviderClient,
        id_factory: Callable[[], str] = generate_account_id,
    ):
        self.owner_service = owner_service
        self.user_service = user_service
        self.identity_provider = identity_provider
        self.id_factory = id_factory

    # ========================================================================
    # Public operations
    # ========================================================================

    def create_owner(self, name: str, email: str, password: str) -> Owner:
        """
        Register an owner together with its identity.

        Raises:
            DuplicateException: If an owner already uses the email
            OrchestrationException: If the identity could not be created
        """
        record = {"id": self.id_factory(), "name": name, "email": email}
        outcome = self._create_with_identity(self.owner_service, "Owner", record, password)
        return self._resolve_create(outcome)

    def create_user(
        self,
        owner_id: str,
        name: str,
        email: str,
        role: Union[UserRole, str],
        password: str,
    ) -> User:
        """
        Create a user under an owner together with its identity.

        Raises:
            NotFoundException: If the owner does not exist
            DuplicateException: If a user already uses the email
            OrchestrationException: If the identity could not be created
        """
        self.owner_service.get_by_id(owner_id)

        record = {
            "id": self.id_factory(),
            "owner_id": owner_id,
            "name": name,
            "email": email,
            "role": role,
        }
        outcome = self._create_with_identity(self.user_service, "User", record, password)
        return self._resolve_create(outcome)

    def delete_owner(self, id: str) -> None:
        """
        Delete an owner and its identity.

        Raises:
            NotFoundException: If the owner does not exist
            ConflictException: If the owner still has users
            OrchestrationException: If the identity could not be deleted (owner restored)
            DataInconsistencyException: If the owner could not be restored either
        """
        # Users never outlive their owner; refuse before anything is written
        user_count = self.user_service.count_for_owner(id)
        if user_count:
            raise ConflictException("Owner still has users", {"id": id, "users": user_count})

        outcome = self._delete_with_identity(self.owner_service, "Owner", id)
        self._resolve_delete(outcome)

    def delete_user(self, id: str) -> None:
        """
        Delete a user and its identity.

        Raises:
            NotFoundException: If the user does not exist
            OrchestrationException: If the identity could not be deleted (user restored)
            DataInconsistencyException: If the user could not be restored either
        """
        outcome = self._delete_with_identity(self.user_service, "User", id)
        self._resolve_delete(outcome)

    # ========================================================================
    # Create workflow
    # ========================================================================

    def _create_with_identity(
        self,
        service: AccountService,
        kind: str,
        record: Dict[str, Any],
        password: str,
    ) -> WorkflowOutcome:
        outcome = WorkflowOutcome(kind=kind, record_id=record["id"])

        # Nothing written yet: failures propagate as they are
        outcome.record = service.create(record)
        outcome.transition(WorkflowState.LOCAL_CREATED)

        try:
            self.identity_provider.create_identity(
                uid=outcome.record_id,
                email=record["email"],
                password=password,
                display_name=record["name"],
            )
        except Exception as e:
            logger.warning(f"Identity creation failed for {kind} {outcome.record_id}, rolling back: {e}")
            outcome.error = e
            return self._compensate_create(service, outcome)

        outcome.transition(WorkflowState.IDENTITY_CREATED)
        logger.info(f"{kind} {outcome.record_id} created with identity")
        return outcome

    def _compensate_create(self, service: AccountService, outcome: WorkflowOutcome) -> WorkflowOutcome:
        try:
            service.delete(outcome.record_id)
        except Exception as e:
            outcome.compensation_error = e
            outcome.transition(WorkflowState.ROLLBACK_FAILED)
            logger.critical(
                f"Rollback failed: {outcome.kind} {outcome.record_id} exists without an identity: {e}"
            )
            return outcome

        outcome.record = None
        outcome.transition(WorkflowState.ROLLED_BACK)
        logger.info(f"Rolled back {outcome.kind} {outcome.record_id}")
        return outcome

    @staticmethod
    def _resolve_create(outcome: WorkflowOutcome):
        if outcome.state is WorkflowState.IDENTITY_CREATED:
            return outcome.record

        # ROLLED_BACK and ROLLBACK_FAILED look the same to the caller
        raise OrchestrationException(
            f"Failed to create {outcome.kind.lower()}", outcome.details
        ) from outcome.error

    # ========================================================================
    # Delete workflow
    # ========================================================================

    def _delete_with_identity(self, service: AccountService, kind: str, id: str) -> WorkflowOutcome:
        outcome = WorkflowOutcome(kind=kind, record_id=id)

        # Nothing written yet: failures propagate as they are
        record = service.get_by_id(id)
        outcome.record = service.snapshot(record)
        outcome.transition(WorkflowState.FETCHED)

        service.delete(id)
        outcome.transition(WorkflowState.LOCAL_DELETED)

        try:
            self.identity_provider.delete_identity(id)
        except Exception as e:
            logger.warning(f"Identity deletion failed for {kind} {id}, restoring record: {e}")
            outcome.error = e
            return self._compensate_delete(service, outcome)

        outcome.transition(WorkflowState.IDENTITY_DELETED)
        logger.info(f"{kind} {id} deleted with identity")
        return outcome

    def _compensate_delete(self, service: AccountService, outcome: WorkflowOutcome) -> WorkflowOutcome:
        try:
            service.create(outcome.record)
        except Exception as e:
            outcome.compensation_error = e
            outcome.transition(WorkflowState.RESTORE_FAILED)
            logger.critical(
                f"Rollback failed: {outcome.kind} {outcome.record_id} removed from the account store "
                f"but its identity still exists: {e}"
            )
            return outcome

        outcome.transition(WorkflowState.RESTORED)
        logger.info(f"Restored {outcome.kind} {outcome.record_id}")
        return outcome

    @staticmethod
    def _resolve_delete(outcome: WorkflowOutcome) -> None:
        if outcome.state is WorkflowState.IDENTITY_DELETED:
            return

        kind = outcome.kind.lower()
        if outcome.state is WorkflowState.RESTORE_FAILED:
            raise DataInconsistencyException(
                f"Failed to delete {kind} and rollback failed. Data inconsistency detected.",
                outcome.details,
            ) from outcome.compensation_error

        raise OrchestrationException(f"Failed to delete {kind}", outcome.details) from outcome.error
