import datetime
from typing import Callable, Optional

from nsgc.dto.settings import NotificationToggles
from nsgc.services.protocol.notification_service_protocol import MessageSenderProtocol
from nsgc.util.duration import format_duration, round_duration
from nsgc.util.logger import log

TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

class NotificationService:
    """Formats lifecycle events and hands them to the message sender.

    Every method is safe to call unconditionally: a disabled event kind or an
    unconfigured sender is a silent no-op. Delivery failures are raised as
    NotificationError for the caller to log; they never retry.
    """

    def __init__(
            self,
            sender: MessageSenderProtocol,
            toggles: NotificationToggles,
            clock: Optional[Callable[[], datetime.datetime]] = None
        ):
        self.sender = sender
        self.toggles = toggles
        self.clock = clock or (lambda: datetime.datetime.now().astimezone())

    def send_startup(self) -> None:
        if not self._enabled("startup", self.toggles.startup):
            return
        text = ("🚀 *kube-ns-gc Started*\n\n"
                f"🕐 Time: {self._now()}\n"
                "📋 Service is now monitoring namespaces for cleanup")
        self.sender.send_message(text)

    def send_namespace_deleted(self, namespace: str, age: datetime.timedelta) -> None:
        if not self._enabled("namespace deletion", self.toggles.namespace_deleted):
            return
        text = ("🗑️ *Namespace Deleted*\n\n"
                f"📦 Namespace: `{namespace}`\n"
                f"⏰ Age: {format_duration(round_duration(age, datetime.timedelta(minutes=1)))}\n"
                f"🕐 Time: {self._now()}")
        self.sender.send_message(text)

    def send_release_deleted(self, release_name: str, namespace: str) -> None:
        if not self._enabled("Helm release deletion", self.toggles.helm_release_deleted):
            return
        text = ("🧹 *Helm Release Deleted*\n\n"
                f"📦 Release: `{release_name}`\n"
                f"🏠 Namespace: `{namespace}`\n"
                f"🕐 Time: {self._now()}")
        self.sender.send_message(text)

    def send_cleanup_summary(self, total: int, cleaned: int, duration: datetime.timedelta, errored: int = 0) -> None:
        if not self._enabled("cleanup summary", self.toggles.cleanup_summary):
            return
        lines = ["📊 *Cleanup Summary*\n",
                 f"🔍 Total namespaces checked: {total}",
                 f"🗑️ Namespaces deleted: {cleaned}"]
        if errored:
            lines.append(f"⚠️ Namespaces failed: {errored}")
        lines += [f"⏱️ Cleanup duration: {format_duration(round_duration(duration, datetime.timedelta(seconds=1)))}",
                  f"🕐 Time: {self._now()}"]
        self.sender.send_message("\n".join(lines))

    def send_error(self, message: str, error: Exception) -> None:
        if not self._enabled("error", self.toggles.errors):
            return
        text = ("❌ *Error*\n\n"
                f"📝 Message: {message}\n"
                f"🔍 Error: `{error}`\n"
                f"🕐 Time: {self._now()}")
        self.sender.send_message(text)

    def _enabled(self, kind: str, toggle: bool) -> bool:
        if not toggle:
            log(f"{kind.capitalize()} notifications are disabled", "DEBUG")
            return False
        return self.sender.is_configured()

    def _now(self) -> str:
        return self.clock().strftime(TIME_FORMAT)
