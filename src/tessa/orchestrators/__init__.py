"""
Orchestrators package.

Workflows that span the account store and the identity provider.

Usage:
    from orchestrators import AccountOrchestrator

    orchestrator = AccountOrchestrator(owner_service, user_service, identity_provider)
    owner = orchestrator.create_owner(name, email, password)
"""

from orchestrators.account_orchestrator import (
    AccountOrchestrator,
    WorkflowOutcome,
    WorkflowState,
)

__all__ = [
    "AccountOrchestrator",
    "WorkflowOutcome",
    "WorkflowState",
]
