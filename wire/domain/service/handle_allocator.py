"""Unique handle allocator."""

import re
import unicodedata

import logfire

from wire.domain.repository import AccountRepository
from wire.domain.value import Handle, ProviderProfile
from wire.domain.value.types import HANDLE_MAX_LENGTH

from .base import Service

DEFAULT_BASE_HANDLE = "user"

_WHITESPACE = re.compile(r"\s+")


def normalize_base_handle(raw: str) -> str:
    """Turn free text into a handle base.

    Whitespace runs become ``_``. Letters, combining marks (Khmer vowel
    signs) and digits are kept along with ``_``, ``.`` and ``-``; everything
    else is dropped. Case is kept.
    """
    collapsed = _WHITESPACE.sub("_", raw.strip())
    cleaned = "".join(
        ch
        for ch in collapsed
        if ch in "_.-" or unicodedata.category(ch)[0] in ("L", "M", "N")
    ).strip("_")
    return cleaned[:HANDLE_MAX_LENGTH]


class HandleAllocator(Service):
    """Derives a handle from a provider profile and makes it unique."""

    def __init__(self, account_repository: AccountRepository) -> None:
        """Initialize handle allocator.

        Args:
            account_repository: Account repository
        """
        self.account_repository = account_repository

    def derive_base_handle(self, profile: ProviderProfile) -> str:
        """Pick the base handle for a new account.

        Uses the display name, falling back to the local part of the
        contact address, then to ``user``.

        Args:
            profile: Validated provider profile

        Returns:
            Base handle (not yet checked for uniqueness)
        """
        for source in (profile.display_name, profile.contact_address.local_part):
            if source:
                base = normalize_base_handle(source)
                if base:
                    return base
        return DEFAULT_BASE_HANDLE

    async def allocate(self, base: str) -> Handle:
        """Return the first free handle among base, base_1, base_2, ...

        Candidates are checked one query at a time so each check sees the
        result of the previous one. The result is unique at the moment of
        return only; a concurrent insert is caught by the store's unique
        constraint when the account is created.

        Args:
            base: Base handle

        Returns:
            Handle not used by any account at the time of the last check
        """
        with logfire.span("handle_allocator.allocate", base=base):
            candidate = Handle(base)
            suffix = 0
            while await self.account_repository.find_by_handle(candidate) is not None:
                suffix += 1
                candidate = self._with_suffix(base, suffix)

            logfire.info(
                "Handle allocated", base=base, handle=candidate.root, attempts=suffix + 1
            )
            return candidate

    @staticmethod
    def _with_suffix(base: str, suffix: int) -> Handle:
        tail = f"_{suffix}"
        return Handle(base[: HANDLE_MAX_LENGTH - len(tail)] + tail)
