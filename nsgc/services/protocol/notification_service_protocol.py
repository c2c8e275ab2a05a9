import datetime
from typing import Protocol

class MessageSenderProtocol(Protocol):
    def is_configured(self) -> bool:
        ...

    def send_message(self, text: str) -> None:
        ...

class NotificationServiceProtocol(Protocol):
    def send_startup(self) -> None:
        ...

    def send_namespace_deleted(self, namespace: str, age: datetime.timedelta) -> None:
        ...

    def send_release_deleted(self, release_name: str, namespace: str) -> None:
        ...

    def send_cleanup_summary(self, total: int, cleaned: int, duration: datetime.timedelta, errored: int = 0) -> None:
        ...

    def send_error(self, message: str, error: Exception) -> None:
        ...
