"""
Identity provider client.

This module provides the contract the account orchestrator and the API
authentication dependency rely on, and its Firebase Authentication
implementation:
- Credentialed identity creation and deletion
- Custom role claims
- ID token verification
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from core.config import Settings
from core.exceptions import (
    CustomClaimsException,
    IdentityProviderException,
    TokenExpiredException,
    UnauthorizedException,
)

logger = logging.getLogger("IDENTITY_PROVIDER")


class IdentityProviderClient(ABC):
    """
    Contract for the external authentication service.

    The uid of every identity mirrors the id of the owner or user record
    it belongs to.
    """

    @abstractmethod
    def create_identity(self, uid: str, email: str, password: str, display_name: str) -> None:
        """
        Create a credentialed identity under ``uid``.

        Raises:
            IdentityProviderException: On any provider failure
        """

    @abstractmethod
    def delete_identity(self, uid: str) -> None:
        """
        Remove the identity ``uid``.

        Raises:
            IdentityProviderException: On any provider failure, including an unknown uid
        """

    @abstractmethod
    def set_custom_claims(self, uid: str, role: str) -> None:
        """
        Attach a role claim to the identity ``uid``.

        Raises:
            CustomClaimsException: If the claims could not be set
        """

    @abstractmethod
    def verify_token(self, token: str) -> str:
        """
        Verify an ID token and return the uid it was issued for.

        Raises:
            TokenExpiredException: If the token has expired
            UnauthorizedException: If the token is invalid for any other reason
        """


class FirebaseIdentityProvider(IdentityProviderClient):
    """
    Firebase Authentication implementation of the identity provider.

    The Firebase app is initialised once per process; an already
    initialised default app is reused.
    """

    def __init__(
        self,
        credentials_info: Optional[Dict[str, Any]] = None,
        app: Optional[firebase_admin.App] = None,
    ):
        """
        Initialize the Firebase client.

        Args:
            credentials_info: Service-account mapping (see Settings.get_firebase_credentials)
            app: Existing Firebase app to use instead of the default one
        """
        self._app = app or self._get_or_create_app(credentials_info)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseIdentityProvider":
        return cls(credentials_info=settings.get_firebase_credentials())

    @staticmethod
    def _get_or_create_app(credentials_info: Optional[Dict[str, Any]]) -> firebase_admin.App:
        try:
            return firebase_admin.get_app()
        except ValueError:
            if not credentials_info:
                raise IdentityProviderException("Firebase credentials not configured")
            app = firebase_admin.initialize_app(credentials.Certificate(credentials_info))
            logger.info(f"Firebase app initialized for project {credentials_info.get('project_id')}")
            return app

    def create_identity(self, uid: str, email: str, password: str, display_name: str) -> None:
        try:
            auth.create_user(
                uid=uid,
                email=email,
                password=password,
                display_name=display_name,
                app=self._app,
            )
        except (FirebaseError, ValueError) as e:
            logger.error(f"Failed to create identity {uid}: {e}")
            raise IdentityProviderException(f"Failed to create identity {uid}", {"uid": uid}) from e

        logger.info(f"Identity {uid} created")

    def delete_identity(self, uid: str) -> None:
        try:
            auth.delete_user(uid, app=self._app)
        except (FirebaseError, ValueError) as e:
            logger.error(f"Failed to delete identity {uid}: {e}")
            raise IdentityProviderException(f"Failed to delete identity {uid}", {"uid": uid}) from e

        logger.info(f"Identity {uid} deleted")

    def set_custom_claims(self, uid: str, role: str) -> None:
        try:
            auth.set_custom_user_claims(uid, {"role": role}, app=self._app)
        except (FirebaseError, ValueError) as e:
            logger.error(f"Failed to set custom claims on {uid}: {e}")
            raise CustomClaimsException(uid) from e

    def verify_token(self, token: str) -> str:
        try:
            decoded = auth.verify_id_token(token, app=self._app)
        except auth.ExpiredIdTokenError as e:
            raise TokenExpiredException() from e
        except (FirebaseError, ValueError) as e:
            logger.debug(f"Rejected ID token: {e}")
            raise UnauthorizedException() from e

        uid = (decoded.get("uid") or decoded.get("user_id")) if decoded else None
        if not uid:
            raise UnauthorizedException()
        return uid
