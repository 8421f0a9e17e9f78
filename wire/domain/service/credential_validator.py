"""Credential validator: first step of provider sign-in."""

from collections.abc import Mapping, Sequence
from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from wire.domain.error import InvalidProviderPayloadError, MissingContactAddressError
from wire.domain.value import AuthProvider, ContactAddress, ProviderProfile

from .base import Service


def _first_value(entries: Any) -> str | None:
    """Return the first non-empty ``value`` from a list of ``{"value": ...}``."""
    if not isinstance(entries, Sequence) or isinstance(entries, str):
        return None
    for entry in entries:
        if isinstance(entry, Mapping):
            value = entry.get("value")
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


class CredentialValidator(Service):
    """Validates a raw provider profile and maps it to `ProviderProfile`.

    The payload follows the passport profile shape::

        {
            "id": "1093...",
            "displayName": "Sokha Chan",
            "emails": [{"value": "sokha@example.com", "verified": True}],
            "photos": [{"value": "https://lh3.googleusercontent.com/..."}],
        }

    Email entries explicitly marked ``verified: False`` are skipped; entries
    without a ``verified`` flag are trusted, as the provider only returns
    addresses it owns.
    """

    def validate(
        self, provider: AuthProvider, payload: Mapping[str, Any]
    ) -> ProviderProfile:
        """Validate a provider payload.

        Args:
            provider: Provider that produced the payload
            payload: Raw profile from the OAuth callback

        Returns:
            Typed provider profile with a normalised contact address

        Raises:
            MissingContactAddressError: If no usable verified email is present
            InvalidProviderPayloadError: If the provider user ID is missing
        """
        with logfire.span("credential_validator.validate", provider=provider.value):
            contact_address = self._extract_contact_address(provider, payload)

            provider_user_id = payload.get("id")
            if provider_user_id is None or not str(provider_user_id).strip():
                logfire.warn("Provider payload without user id", provider=provider.value)
                raise InvalidProviderPayloadError(
                    f"{provider.value} profile is missing the provider user id"
                )

            display_name = payload.get("displayName")
            if not isinstance(display_name, str) or not display_name.strip():
                display_name = None

            profile = ProviderProfile(
                provider=provider,
                provider_user_id=str(provider_user_id).strip(),
                contact_address=contact_address,
                display_name=display_name.strip() if display_name else None,
                avatar_url=_first_value(payload.get("photos")),
            )
            logfire.info(
                "Provider payload validated",
                provider=provider.value,
                contact_address=contact_address.root,
            )
            return profile

    def _extract_contact_address(
        self, provider: AuthProvider, payload: Mapping[str, Any]
    ) -> ContactAddress:
        emails = payload.get("emails")
        if isinstance(emails, Sequence) and not isinstance(emails, str):
            for entry in emails:
                if not isinstance(entry, Mapping):
                    continue
                if entry.get("verified") is False:
                    continue
                value = entry.get("value")
                if not isinstance(value, str) or not value.strip():
                    continue
                try:
                    return ContactAddress(value)
                except PydanticValidationError:
                    logfire.warn(
                        "Skipping malformed email in provider payload",
                        provider=provider.value,
                    )

        logfire.warn("Provider payload without contact address", provider=provider.value)
        raise MissingContactAddressError(provider.value)
