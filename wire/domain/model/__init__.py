"""Domain model entities for RazeWire accounts."""

from wire.domain.model.account import Account

__all__ = ["Account"]
