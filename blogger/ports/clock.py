from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Source of the timestamps stamped on posts."""

    def now(self) -> datetime:
        """Current time, timezone-aware (UTC)."""
        ...
