"""
External service integrations package.

This package contains client wrappers for external services:
- Identity provider: Firebase Authentication

Each integration exposes an abstract contract so it can be:
- Easily replaced by a fake in tests
- Swapped out for an alternative provider

Usage:
    from integrations import FirebaseIdentityProvider

    provider = FirebaseIdentityProvider.from_settings(get_settings())
    provider.create_identity(uid, email, password, display_name)
"""

from integrations.identity_provider import FirebaseIdentityProvider, IdentityProviderClient

__all__ = [
    "FirebaseIdentityProvider",
    "IdentityProviderClient",
]
