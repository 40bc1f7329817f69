from datetime import UTC, datetime


class SystemClock:
    """Wall clock used for post timestamps; always UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)
