"""
Request authentication dependencies.

- require_api_credentials: HTTP Basic credentials guarding every API route
- get_current_uid: identity provider token from the ``userauthorization`` header
"""

import secrets
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from core.config import Settings
from core.dependencies import get_identity_provider, get_settings_from_app
from core.exceptions import UnauthorizedException
from integrations.identity_provider import IdentityProviderClient

basic_auth = HTTPBasic(auto_error=False)


def require_api_credentials(
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_auth),
    settings: Settings = Depends(get_settings_from_app),
) -> None:
    """
    Check the HTTP Basic credentials against AUTH_API_USERNAME/AUTH_API_PASSWORD.

    Raises:
        UnauthorizedException: If the header is missing or the credentials differ
    """
    if credentials is None:
        raise UnauthorizedException("Missing Authorization Header")

    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.auth_api_username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.auth_api_password.encode("utf-8")
    )
    if not (username_ok and password_ok):
        raise UnauthorizedException("Invalid Authentication Credentials")


def get_current_uid(
    userauthorization: Optional[str] = Header(default=None),
    identity_provider: IdentityProviderClient = Depends(get_identity_provider),
) -> str:
    """
    Resolve the caller's uid from their identity provider token.

    Raises:
        UnauthorizedException: If the token is missing or invalid
        TokenExpiredException: If the token has expired
    """
    if not userauthorization:
        raise UnauthorizedException()
    return identity_provider.verify_token(userauthorization)
