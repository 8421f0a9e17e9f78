"""Domain services."""

from .account_matcher import AccountMatcher
from .account_provisioner import AccountProvisioner
from .account_reconciler import AccountReconciler
from .account_service import AccountService
from .auth_service import AuthService, OAuthClient
from .base import Service
from .credential_validator import CredentialValidator
from .handle_allocator import HandleAllocator
from .identity_resolution_service import IdentityResolutionService, ResolvedIdentity
from .jwt_service import JWTService

__all__ = [
    "AccountMatcher",
    "AccountProvisioner",
    "AccountReconciler",
    "AccountService",
    "AuthService",
    "CredentialValidator",
    "HandleAllocator",
    "IdentityResolutionService",
    "JWTService",
    "OAuthClient",
    "ResolvedIdentity",
    "Service",
]
