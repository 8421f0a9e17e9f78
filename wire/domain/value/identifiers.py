"""Strongly typed identifiers for domain entities.

NewType keeps account IDs from being mixed up with other UUIDs.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
