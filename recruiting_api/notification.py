"""
Per-request error collector.

Services push human-readable messages here; routers look at it at the
end of the request to decide between a success and an error envelope.
A new collector is created for every request by `get_notifier()`;
never share one between requests.
"""


class NotificationCollector:
    def __init__(self):
        self._messages: list[str] = []

    def handle(self, message: str) -> None:
        self._messages.append(message)

    def is_notification(self) -> bool:
        """True once anything has been reported."""
        return bool(self._messages)

    def get_notification(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)


def get_notifier() -> NotificationCollector:
    """FastAPI dependency: one collector per request (FastAPI caches it within the request)."""
    return NotificationCollector()
