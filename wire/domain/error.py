"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an account attempts an operation above its access level."""

    def __init__(self, action: str, account_id: str):
        self.action = action
        self.account_id = account_id
        super().__init__(f"Account {account_id} is not authorized to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class IdentityResolutionError(DomainError):
    """Base error for a failed provider sign-in attempt."""

    pass


class MissingContactAddressError(IdentityResolutionError):
    """Provider payload carries no usable, verified contact address."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"No verified email address returned by {provider}")


class InvalidProviderPayloadError(IdentityResolutionError):
    """Provider payload is missing a field required to identify the principal."""

    pass


class DuplicateContactAddressError(IdentityResolutionError):
    """Another account claimed the contact address during provisioning."""

    def __init__(self, contact_address: str):
        self.contact_address = contact_address
        super().__init__(f"An account already exists for {contact_address}")


class DuplicateHandleError(IdentityResolutionError):
    """Another account claimed the allocated handle during provisioning."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"Handle already taken: {handle}")


class AccountStoreError(IdentityResolutionError):
    """The account store failed while resolving an identity."""

    pass


class HandleUnavailableError(DomainError):
    """Raised when an account asks for a handle another account holds."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"Handle already taken: {handle}")
